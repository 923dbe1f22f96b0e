from campus_tour.extensions import db
from campus_tour.models._time import utcnow, isoformat

class User(db.Model):
    """One login submission. Append-only; a username may appear many times."""
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(255), nullable=True, index=True)
    # digest or literal value, depending on PASSWORD_POLICY at write time
    password = db.Column(db.String(255), nullable=True)
    login_time = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "username": self.username,
            "password": self.password,
            "loginTime": isoformat(self.login_time),
        }

    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username}>"
