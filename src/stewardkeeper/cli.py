"""Command-line interface for StewardKeeper."""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal, InvalidOperation
from pathlib import Path

import click

from .config import BaseConfig
from .context import AppContext, create_app_context
from .domain.errors import ReportInputError, SettingValueError
from .domain.periods import RangeKind, TimeRange, parse_date
from .logging_config import setup_logging
from .models import Donation, Income, Recipient
from .services.export import donation_rows, export_rows_csv, export_rows_json, income_rows
from .services.money import format_money
from .services.obligations import pending_tithe_total
from .services.reports import load_report
from .services.settings import validate_setting

RANGE_CHOICES = click.Choice([k.value for k in RangeKind], case_sensitive=False)


def _context(ctx: click.Context) -> AppContext:
    if ctx.obj is None:
        config = BaseConfig()
        setup_logging(config)
        ctx.obj = create_app_context(config)
    return ctx.obj


def _time_range(kind: str, as_of: str | None) -> TimeRange:
    try:
        return TimeRange.parse(kind, as_of)
    except ReportInputError as exc:
        raise click.BadParameter(str(exc)) from exc


def _amount(value: str) -> Decimal:
    try:
        amount = Decimal(value)
    except InvalidOperation as exc:
        raise click.BadParameter(f"Invalid amount: {value}") from exc
    if not amount.is_finite() or amount < 0:
        raise click.BadParameter("Amount must be a non-negative number")
    return amount


def _day(value: str | None) -> date:
    if value is None:
        return date.today()
    try:
        return parse_date(value)
    except ReportInputError as exc:
        raise click.BadParameter(str(exc)) from exc


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Track tithes and donations and report on giving."""


@main.command("init-db")
@click.pass_context
def init_db(ctx: click.Context) -> None:
    """Create tables and seed default settings."""

    app = _context(ctx)
    click.echo(f"Database ready: {app.config.DATABASE_URL}")


@main.command("add-recipient")
@click.argument("name")
@click.option("--category", default="Church", show_default=True)
@click.option("--notes", default="")
@click.option("--default", "is_default", is_flag=True, help="Make this the default recipient")
@click.pass_context
def add_recipient(ctx: click.Context, name: str, category: str, notes: str, is_default: bool) -> None:
    """Add a giving recipient."""

    app = _context(ctx)
    recipient = app.recipient_repo.create(
        Recipient(name=name, category=category, notes=notes, is_default=is_default)
    )
    click.echo(f"Recipient {recipient.id}: {recipient.name}")


@main.command("add-donation")
@click.argument("amount")
@click.option("--recipient-id", type=int, default=None)
@click.option("--date", "day", default=None, help="YYYY-MM-DD (default today)")
@click.option("--type", "donation_type", default="Tithe", show_default=True)
@click.option("--notes", default="")
@click.pass_context
def add_donation(
    ctx: click.Context,
    amount: str,
    recipient_id: int | None,
    day: str | None,
    donation_type: str,
    notes: str,
) -> None:
    """Record a donation."""

    app = _context(ctx)
    if recipient_id is None:
        default = app.recipient_repo.get_default()
        recipient_id = default.id if default else None
    donation = app.donation_repo.create(
        Donation(
            amount=_amount(amount),
            occurred_on=_day(day),
            recipient_id=recipient_id,
            donation_type=donation_type,
            notes=notes,
        )
    )
    click.echo(f"Donation {donation.id} recorded")


@main.command("add-income")
@click.argument("amount")
@click.option("--source", required=True)
@click.option("--date", "day", default=None, help="YYYY-MM-DD (default today)")
@click.option("--notes", default="")
@click.pass_context
def add_income(ctx: click.Context, amount: str, source: str, day: str | None, notes: str) -> None:
    """Record income."""

    app = _context(ctx)
    income = app.income_repo.create(
        Income(amount=_amount(amount), occurred_on=_day(day), source=source, notes=notes)
    )
    click.echo(f"Income {income.id} recorded")


@main.command("process-income")
@click.argument("income_id", type=int)
@click.pass_context
def process_income(ctx: click.Context, income_id: int) -> None:
    """Mark an income entry as tithed against."""

    app = _context(ctx)
    if app.income_repo.mark_processed(income_id) is None:
        raise click.ClickException(f"Income {income_id} not found")
    click.echo(f"Income {income_id} marked processed")


@main.command("set")
@click.argument("key", type=click.Choice(["currency", "tithePercentage", "monthlyGoal", "annualGoal"]))
@click.argument("value")
@click.pass_context
def set_setting(ctx: click.Context, key: str, value: str) -> None:
    """Update a preference."""

    try:
        value = validate_setting(key, value)
    except SettingValueError as exc:
        raise click.BadParameter(str(exc), param_hint="VALUE") from exc
    app = _context(ctx)
    app.settings_repo.set(key, value)
    click.echo(f"{key} = {value}")


@main.command("pending")
@click.pass_context
def pending(ctx: click.Context) -> None:
    """Show the tithe owed on unprocessed income."""

    app = _context(ctx)
    settings = app.report_settings()
    owed = pending_tithe_total(app.income_repo, settings)
    click.echo(f"Pending tithe: {format_money(owed, settings.currency)} ({settings.tithe_rate}% rate)")


@main.command("report")
@click.option("--range", "kind", type=RANGE_CHOICES, default="month", show_default=True)
@click.option("--as-of", default=None, help="Report date YYYY-MM-DD (default today)")
@click.option("--json", "as_json", is_flag=True, help="Print the full view model as JSON")
@click.pass_context
def report(ctx: click.Context, kind: str, as_of: str | None, as_json: bool) -> None:
    """Summarize giving for a month, quarter, or year."""

    app = _context(ctx)
    settings = app.report_settings()
    view = load_report(
        _time_range(kind, as_of),
        donations_repo=app.donation_repo,
        income_repo=app.income_repo,
        recipients_repo=app.recipient_repo,
        settings=settings,
    )
    if as_json:
        click.echo(json.dumps(view.to_dict(), indent=2))
        return

    cur = view.currency
    click.echo(f"{view.range.kind.value.title()} {view.period.start} .. {view.period.end}")
    click.echo(
        f"Goal: {format_money(view.period_total, cur)} / {format_money(view.period_goal.goal, cur)}"
        f" ({view.period_goal.percent_display}%)"
    )
    click.echo(
        f"Annual: {format_money(view.annual_total, cur)} / {format_money(view.annual_goal.goal, cur)}"
        f" ({view.annual_goal.percent_display}%)"
    )
    click.echo(f"Pending tithe: {format_money(view.pending.owed, cur)}")
    if not view.slices:
        click.echo("No data available for recipients.")
    for item in view.slices:
        click.echo(f"  {item.name}: {format_money(item.value, cur)} ({item.percentage:.1f}%)")


@main.command("export")
@click.option("--what", type=click.Choice(["donations", "income", "report"]), default="donations", show_default=True)
@click.option("--range", "kind", type=RANGE_CHOICES, default="year", show_default=True)
@click.option("--as-of", default=None, help="Report date YYYY-MM-DD (default today)")
@click.option("--format", "fmt", type=click.Choice(["csv", "json"]), default="csv", show_default=True)
@click.option("--output", type=click.Path(path_type=Path), required=True)
@click.pass_context
def export(ctx: click.Context, what: str, kind: str, as_of: str | None, fmt: str, output: Path) -> None:
    """Export donations, income, or a full report."""

    app = _context(ctx)
    time_range = _time_range(kind, as_of)
    period = time_range.period()

    if what == "report":
        view = load_report(
            time_range,
            donations_repo=app.donation_repo,
            income_repo=app.income_repo,
            recipients_repo=app.recipient_repo,
            settings=app.report_settings(),
        )
        data: object = view.to_dict() if fmt == "json" else list(view.rows)
    elif what == "income":
        data = income_rows(app.income_repo.filter_by_date_range(period.start, period.end))
    else:
        data = donation_rows(
            app.donation_repo.filter_by_date_range(period.start, period.end),
            app.recipient_repo.list_all(),
        )

    try:
        path = export_rows_json(data, output) if fmt == "json" else export_rows_csv(data, output)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Export written: {path}")


@main.command("chart")
@click.option("--range", "kind", type=RANGE_CHOICES, default="month", show_default=True)
@click.option("--as-of", default=None, help="Report date YYYY-MM-DD (default today)")
@click.option("--output-dir", type=click.Path(path_type=Path), required=True)
@click.pass_context
def chart(ctx: click.Context, kind: str, as_of: str | None, output_dir: Path) -> None:
    """Render giving charts to PNG files."""

    from .services.charts import giving_by_recipient_png, giving_over_time_png

    app = _context(ctx)
    view = load_report(
        _time_range(kind, as_of),
        donations_repo=app.donation_repo,
        income_repo=app.income_repo,
        recipients_repo=app.recipient_repo,
        settings=app.report_settings(),
    )
    over_time = giving_over_time_png(view, output_dir / f"giving_over_time_{kind}.png")
    by_recipient = giving_by_recipient_png(view, output_dir / f"giving_by_recipient_{kind}.png")
    click.echo(f"Charts written: {over_time}, {by_recipient}")


if __name__ == "__main__":  # pragma: no cover
    main()
