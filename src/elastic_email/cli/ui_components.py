"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from elastic_email.core.domain.models import AccountOverview, ContactList, EmailSend, FilePayload


def build_overview_table(overview: AccountOverview) -> Table:
    table = Table(title="Account Overview")
    table.add_column("Metric", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("Emails sent", str(overview.total_emails_sent))
    table.add_row("Credit", "-" if overview.credit is None else str(overview.credit))
    table.add_row("Reputation", "-" if overview.reputation is None else f"{overview.reputation:.1f}")
    table.add_row("Contacts", str(overview.contact_count))
    table.add_row("Blocked contacts", str(overview.blocked_contacts_count))
    table.add_row("Campaigns", str(overview.campaign_count))
    table.add_row("Templates", str(overview.template_count))
    table.add_row("Sub-accounts", str(overview.sub_account_count))
    table.add_row("In progress", str(overview.in_progress_count))
    return table


def build_lists_table(lists: Sequence[ContactList]) -> Table:
    table = Table(title="Contact Lists")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Contacts", style="white", justify="right")
    table.add_column("Public ID", style="magenta")
    table.add_column("Added", style="dim")
    for item in lists:
        added = item.date_added.strftime("%Y-%m-%d") if item.date_added else "-"
        table.add_row(item.list_name, str(item.count), item.public_list_id or "-", added)
    return table


def build_send_panel(result: EmailSend) -> Panel:
    """Panel con los identificadores devueltos por `email/send`."""

    body = Text()
    body.append("Transaction ID: ", style="bold")
    body.append(f"{result.transaction_id or '-'}\n")
    body.append("Message ID: ", style="bold")
    body.append(result.message_id or "-")
    return Panel(body, title=Text("Email queued", style="bold green"), border_style="green")


def describe_file(payload: FilePayload) -> str:
    kind = payload.content_type or "unknown type"
    return f"{payload.file_name} ({len(payload.content)} bytes, {kind})"
