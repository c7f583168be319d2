"""
fnbridge.demo.main - Demo Application

Adapts the callback-based LegacyApi with promisify_all and prints its data:
1. Admins and users
2. Current server time
3. Coffee machine queue length (always fails)
"""

import logging
from datetime import datetime

from rich.console import Console

from fnbridge.core import AdaptedOperationSet, OperationFailure, pipe, promisify_all
from fnbridge.demo.legacy_api import LegacyApi, Person
from fnbridge.functional import map_items

logger = logging.getLogger(__name__)


def build_api(legacy: LegacyApi | None = None) -> AdaptedOperationSet:
    """Adapt every operation of a LegacyApi instance."""
    return promisify_all(legacy or LegacyApi())


def format_person(person: Person) -> str:
    detail = person.role if person.type == "admin" else person.occupation
    return f" - {person.name}, {person.age}, {detail}"


render_people = pipe(map_items(format_person), "\n".join)


async def start_the_app(api: AdaptedOperationSet, console: Console) -> None:
    """Print every dataset the API offers.

    Raises:
        OperationFailure: If any adapted operation fails
    """
    console.print("Admins:")
    console.print(render_people(await api.request_admins()))
    console.print()

    console.print("Users:")
    console.print(render_people(await api.request_users()))
    console.print()

    console.print("Server time:")
    server_time = await api.request_current_server_time()
    console.print(f"   {datetime.fromtimestamp(server_time / 1000):%Y-%m-%d %H:%M:%S}")
    console.print()

    console.print("Coffee machine queue length:")
    console.print(f"   {await api.request_coffee_machine_queue_length()}")


async def run(api: AdaptedOperationSet | None = None, console: Console | None = None) -> int:
    """
    Run the demo and report the outcome.

    Returns:
        Process exit code. A failed operation is reported and handled, so
        the demo exits 0 either way
    """
    api = api if api is not None else build_api()
    if console is None:
        console = Console(highlight=False)

    try:
        await start_the_app(api, console)
    except OperationFailure as e:
        logger.info(f"Demo finished with an operation failure: {e}")
        console.print(f'Error: "{e.message}", but it\'s fine, sometimes errors are inevitable.')
        return 0

    console.print("Success!")
    return 0
