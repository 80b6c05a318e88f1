"""
Commandes CLI pour manipuler la page de demonstration depuis le terminal.

- forms : liste des routes, de leurs champs et zones d'affichage
- submit : remplit un formulaire, le soumet et affiche sa zone
- probe : clique un bouton de diagnostic et affiche sa zone
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from src.adapters.cli.helpers import console, parse_field_assignments, run_route, with_container
from src.services.form_handlers import FORM_ROUTES, FormRoute, find_route


def forms() -> None:
    """Liste les formulaires et boutons de la page."""
    table = Table(title="Routes")
    table.add_column("Nom", style="cyan", no_wrap=True)
    table.add_column("Element")
    table.add_column("Evenement")
    table.add_column("Zone")
    table.add_column("Champs", style="dim")
    for route in FORM_ROUTES:
        table.add_row(
            route.name,
            route.selector,
            route.event,
            route.region,
            ", ".join(route.fields) or "-",
        )
    console.print(table)


def submit(
    route_name: Annotated[
        str,
        typer.Argument(help="Nom du formulaire (voir 'streamflix forms')"),
    ],
    field: Annotated[
        Optional[list[str]],
        typer.Option("--field", "-f", help="Champ du formulaire nom=valeur (repetable)"),
    ] = None,
) -> None:
    """Soumet un formulaire et affiche le resultat de sa zone."""
    route = find_route(route_name)
    if route is None or route.event != "submit":
        names = ", ".join(r.name for r in FORM_ROUTES if r.event == "submit")
        raise typer.BadParameter(
            f"Formulaire inconnu '{route_name}' (disponibles: {names})",
            param_hint="ROUTE_NAME",
        )
    values = parse_field_assignments(field or [], route)
    asyncio.run(_run_and_print(route, values))


def probe(
    full: Annotated[
        bool,
        typer.Option("--full", help="Lance la demonstration complete au lieu du test singleton"),
    ] = False,
) -> None:
    """Lance une sonde de diagnostic du backend."""
    route = find_route("demo-full" if full else "demo-singleton")
    asyncio.run(_run_and_print(route))


@with_container()
async def _run_and_print(
    container, route: FormRoute, values: Optional[dict[str, str]] = None
) -> None:
    """Implementation async commune a submit et probe."""
    text = await run_route(container, route, values)
    console.rule(f"[bold]{route.region}[/bold]")
    typer.echo(text)
