"""CLI commands for wedding events management."""

import asyncio
from datetime import date, time

import httpx
import typer

from src.auth.repository import SqlUserWriteModel
from src.auth.tokens import create_access_token
from src.config.settings import settings
from src.events.dtos import CeremonyNotFoundError, EventNotFoundError, GuestNotFoundError, RSVPStatus
from src.events.repository.write_models import SqlEventWriteModel
from src.wizard.transport_check import (
    build_transport_check_url,
    format_report,
    post_transport_preferences,
)

app = typer.Typer(help="CLI commands for wedding events management")


@app.command()
def check_transport(
    host: str = typer.Option(settings.transport_check_host, "--host", help="Server host"),
    port: int = typer.Option(settings.transport_check_port, "--port", help="Server port"),
    path: str = typer.Option(settings.transport_check_path, "--path", help="Endpoint path"),
    cookie: str = typer.Option(
        settings.transport_check_cookie,
        "--cookie",
        "-c",
        help="Cookie header to send, e.g. 'session=<token>' (see issue-token)",
    ),
):
    """Post sample transport settings to a running server and print the response."""
    if not cookie:
        typer.secho(
            "A session cookie is required; pass --cookie or set TRANSPORT_CHECK_COOKIE",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=2)

    url = build_transport_check_url(host, port, path)
    try:
        response = asyncio.run(post_transport_preferences(url, cookie))
    except httpx.RequestError as e:
        typer.secho(f"Problem with request: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for line in format_report(response):
        typer.echo(line)


async def _issue_token(email: str):
    user = await SqlUserWriteModel().get_or_create_user(email)
    return user, create_access_token(user.user_id)


@app.command()
def issue_token(
    email: str = typer.Option(..., "--email", "-e", help="Email of the user to sign in as"),
):
    """Create the user if needed and print a session token for it."""
    user, token = asyncio.run(_issue_token(email))

    typer.secho(f"User: {user.email} ({user.user_id})", fg=typer.colors.GREEN)
    typer.secho(f"Token: {token}", fg=typer.colors.CYAN)
    typer.secho(f"Cookie: {settings.session_cookie_name}={token}", fg=typer.colors.CYAN)


async def _create_event(
    owner_email: str,
    title: str,
    couple_names: str,
    start_date: date,
    end_date: date,
    location: str | None,
):
    owner = await SqlUserWriteModel().get_or_create_user(owner_email)
    return await SqlEventWriteModel().create_event(
        owner_id=owner.user_id,
        title=title,
        couple_names=couple_names,
        start_date=start_date,
        end_date=end_date,
        location=location,
    )


@app.command()
def create_event(
    owner_email: str = typer.Option(..., "--owner-email", "-o", help="Email of the event owner"),
    title: str = typer.Option(..., "--title", "-t", help="Event title"),
    couple_names: str = typer.Option(..., "--couple-names", help="e.g. 'Anna & Ben'"),
    start_date: str = typer.Option(..., "--start-date", help="YYYY-MM-DD"),
    end_date: str = typer.Option(None, "--end-date", help="YYYY-MM-DD, defaults to the start date"),
    location: str = typer.Option(None, "--location", "-l", help="Venue or city"),
):
    """Create a wedding event owned by the given user."""
    start = date.fromisoformat(start_date)
    end = date.fromisoformat(end_date) if end_date else start
    if end < start:
        typer.secho("End date is before start date", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    event = asyncio.run(_create_event(owner_email, title, couple_names, start, end, location))

    typer.secho("Event created!", fg=typer.colors.GREEN)
    typer.secho(f"  Event ID: {event.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Title: {event.title}", fg=typer.colors.BLUE)
    typer.secho(f"  Owner: {owner_email}", fg=typer.colors.BLUE)


@app.command()
def add_guest(
    event_id: int = typer.Option(..., "--event-id", help="Event to add the guest to"),
    first_name: str = typer.Option(..., "--first-name", "-f"),
    last_name: str = typer.Option(..., "--last-name", "-l"),
    email: str = typer.Option(None, "--email", "-e"),
    phone: str = typer.Option(None, "--phone"),
    status: RSVPStatus = typer.Option(RSVPStatus.PENDING, "--status", help="RSVP status"),
    plus_one: bool = typer.Option(False, "--plus-one/--no-plus-one", help="Allow a plus-one"),
):
    """Add a guest to an event."""
    try:
        guest = asyncio.run(
            SqlEventWriteModel().add_guest(
                event_id=event_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                rsvp_status=status,
                plus_one_allowed=plus_one,
            )
        )
    except EventNotFoundError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("Guest added!", fg=typer.colors.GREEN)
    typer.secho(f"  Guest ID: {guest.id}", fg=typer.colors.CYAN)
    typer.secho(f"  Name: {guest.first_name} {guest.last_name}", fg=typer.colors.BLUE)


@app.command()
def add_ceremony(
    event_id: int = typer.Option(..., "--event-id", help="Event the ceremony belongs to"),
    name: str = typer.Option(..., "--name", "-n", help="e.g. 'Sangeet'"),
    ceremony_date: str = typer.Option(..., "--date", help="YYYY-MM-DD"),
    start_time: str = typer.Option(None, "--start-time", help="HH:MM"),
):
    """Add a ceremony to an event."""
    try:
        ceremony = asyncio.run(
            SqlEventWriteModel().add_ceremony(
                event_id=event_id,
                name=name,
                date=date.fromisoformat(ceremony_date),
                start_time=time.fromisoformat(start_time) if start_time else None,
            )
        )
    except EventNotFoundError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("Ceremony added!", fg=typer.colors.GREEN)
    typer.secho(f"  Ceremony ID: {ceremony.id}", fg=typer.colors.CYAN)


@app.command()
def invite_to_ceremony(
    guest_id: int = typer.Option(..., "--guest-id"),
    ceremony_id: int = typer.Option(..., "--ceremony-id"),
    meal_preference: str = typer.Option(None, "--meal", help="Meal preference"),
):
    """Invite a guest to one of the ceremonies of their event."""
    try:
        asyncio.run(
            SqlEventWriteModel().invite_guest_to_ceremony(
                guest_id=guest_id,
                ceremony_id=ceremony_id,
                meal_preference=meal_preference,
            )
        )
    except (GuestNotFoundError, CeremonyNotFoundError) as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"Guest {guest_id} invited to ceremony {ceremony_id}", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
