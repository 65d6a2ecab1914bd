#!/usr/bin/env python
import asyncio
import logging
import sys
from typing import Optional, Sequence

from rich.logging import RichHandler
from rich.markup import escape

from products_sdk import ProductsClient
from products_sdk import config

logger = logging.getLogger("demo")

USAGE = "Usage: python demo.py [get|create|search]"


async def run_demo(client: ProductsClient, delay: Optional[float] = None):
    delay = config.STEP_DELAY if delay is None else delay
    console = client.console

    console.rule("🛍️  [bold]Men's Clothing API Demo[/bold]")
    console.print(f"Connecting to: {escape(client.base_url)}")

    # -----------------------------
    # Create, then list everything
    # -----------------------------
    product_id = await client.create_product()
    await asyncio.sleep(delay)

    await client.get_all_products()
    await asyncio.sleep(delay)

    # -----------------------------
    # The rest needs the new product's id
    # -----------------------------
    if product_id:
        await client.get_product_by_id(product_id)
        await asyncio.sleep(delay)

        await client.update_product(product_id)
        await asyncio.sleep(delay)

        await client.search_by_category("outer wear")
        await asyncio.sleep(delay)

        await client.delete_product(product_id)
        await asyncio.sleep(delay)

        console.print("\n🔍 Verifying deletion...")
        await client.get_product_by_id(product_id)
    else:
        logger.info("create returned no id, skipping the remaining steps")

    console.print()
    console.rule("✨ [bold green]Demo completed![/bold green]")
    console.print()


# -----------------------------
# Smaller scenarios
# -----------------------------
async def example_get_products(client: ProductsClient):
    client.console.print("\n--- Example: Get All Products ---")
    await client.get_all_products()


async def example_create_and_update(client: ProductsClient):
    client.console.print("\n--- Example: Create and Update ---")
    product_id = await client.create_product()
    if product_id:
        await client.update_product(product_id)


async def example_search(client: ProductsClient):
    client.console.print("\n--- Example: Search Category ---")
    await client.search_by_category("sports ware")


SCENARIOS = {
    "get": example_get_products,
    "create": example_create_and_update,
    "search": example_search,
}


def setup_logging(level_name: str = config.LOG_LEVEL):
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[RichHandler(rich_tracebacks=True)])


def main(argv: Optional[Sequence[str]] = None, client: Optional[ProductsClient] = None, delay: Optional[float] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    client = client or ProductsClient()

    if not args:
        scenario = run_demo(client, delay)
    elif args[0] in SCENARIOS:
        scenario = SCENARIOS[args[0]](client)
    else:
        client.console.print(escape(USAGE))
        client.console.print("No argument runs the full demo")
        return 0

    try:
        asyncio.run(scenario)
    except KeyboardInterrupt:
        client.err_console.print("\n[bold red]Interrupted by user[/bold red]")
        return 1
    except Exception as e:
        logger.debug("demo aborted", exc_info=True)
        client.err_console.print(f"[bold red]Demo failed:[/bold red] {escape(str(e))}")
        return 1
    return 0


def _console_main():
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    _console_main()
