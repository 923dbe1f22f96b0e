from campus_tour.extensions import db
from campus_tour.models._time import utcnow, isoformat

class Feedback(db.Model):
    __tablename__ = "feedbacks"
    id = db.Column(db.Integer, primary_key=True)
    # Presence is not enforced; missing form fields are stored as NULL
    name = db.Column(db.String(255), nullable=True)
    email = db.Column(db.String(320), nullable=True)
    message = db.Column(db.Text, nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    submitted_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, index=True)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "message": self.message,
            "imageUrl": self.image_url,
            "submittedAt": isoformat(self.submitted_at),
        }

    def __repr__(self) -> str:
        return f"<Feedback id={self.id} email={self.email}>"
