import click
from flask.cli import with_appcontext
from campus_tour.extensions import db
from campus_tour.services import current_services

@click.group()
def records():
    """Inspect the login and feedback records."""

@records.command("init-db")
@with_appcontext
def init_db():
    """Create the users/feedbacks tables without running migrations."""
    db.create_all()
    click.echo("Tables created: users, feedbacks")

@records.command("logins")
@click.option("--limit", type=int, default=20, show_default=True)
@with_appcontext
def list_logins(limit):
    for u in current_services().store.list_logins()[:limit]:
        click.echo(f"{u.to_dict()['loginTime']}  {u.username}")

@records.command("feedback")
@click.option("--limit", type=int, default=20, show_default=True)
@with_appcontext
def list_feedback(limit):
    for fb in current_services().store.list_feedback()[:limit]:
        image = f"  [{fb.image_url}]" if fb.image_url else ""
        click.echo(f"{fb.to_dict()['submittedAt']}  {fb.name} <{fb.email}>: {fb.message}{image}")

def register_cli(app):
    app.cli.add_command(records)
