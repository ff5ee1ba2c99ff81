"""Thread Safety Example - Sharing Formatters and the Registry Across Threads.

Thread Safety:
    Amount and MinorAmount are immutable. Formatter.format() and
    Formatter.parse() only read the formatter, so one configured instance
    can serve every thread. The currency registry publishes copy-on-write
    snapshots: readers never block, and registrations are serialized.

Demonstrates:
1. Shared formatter across a thread pool
2. Registering a custom currency while other threads format
3. Isolated registries for tenants with conflicting data

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from currencyengine import Amount, CurrencyRegistry, Formatter, register_currency
from currencyengine.registry import SymbolEntry


# Example 1: Shared formatter (RECOMMENDED)
def example_1_shared_formatter() -> None:
    """Example 1: Configure once, format from many threads."""
    print("=" * 60)
    print("Example 1: Shared Formatter")
    print("=" * 60)

    formatter = Formatter("de", accounting_style=True)

    def render(cents: int) -> str:
        return formatter.format(Amount.from_minor_units(cents, "EUR"))

    with ThreadPoolExecutor(max_workers=8) as executor:
        futures = {executor.submit(render, cents): cents for cents in range(0, 1_000_000, 99_999)}
        for future in as_completed(futures):
            print(f"  {futures[future]:>8} -> {future.result()}")
    print()


# Example 2: Registration during reads
def example_2_concurrent_registration() -> None:
    """Example 2: register_currency() while other threads read."""
    print("=" * 60)
    print("Example 2: Registration During Reads")
    print("=" * 60)

    stop = threading.Event()
    rendered: list[str] = []

    def reader() -> None:
        formatter = Formatter("en")
        while not stop.is_set():
            rendered.append(formatter.format(Amount.parse("1", "USD")))

    threads = [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()

    register_currency("XGC", "", 2, [SymbolEntry("GC", ("en",))])
    stop.set()
    for thread in threads:
        thread.join()

    print(f"  Reads completed: {len(rendered)}")
    print(f"  Custom currency: {Formatter('en').format(Amount.parse('5', 'XGC'))}")
    print()


# Example 3: Per-tenant registries
def example_3_isolated_registries() -> None:
    """Example 3: Separate registries keep tenant overrides apart."""
    print("=" * 60)
    print("Example 3: Isolated Registries")
    print("=" * 60)

    tenant_a = CurrencyRegistry()
    tenant_b = CurrencyRegistry()
    tenant_a.register("USD", "840", 2, "US$")

    amount = Amount.parse("10", "USD")
    print(f"  Tenant A: {Formatter('en', registry=tenant_a).format(amount)}")
    print(f"  Tenant B: {Formatter('en', registry=tenant_b).format(amount)}")
    print()


if __name__ == "__main__":
    example_1_shared_formatter()
    example_2_concurrent_registration()
    example_3_isolated_registries()

    print("=" * 60)
    print("All examples completed!")
    print("=" * 60)
