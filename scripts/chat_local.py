#!/usr/bin/env python3
"""
Interactive local chat harness (no HTTP).

Usage:
  python3 scripts/chat_local.py

What it does:
- Starts the same AdvisorSession the API uses (selection restored from storage)
- Sends your typed messages through ChatUseCase
- Prints whether web search was used and which catalog products were recommended
"""
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from beauty_advisor.application.exceptions import CatalogUnavailable
from beauty_advisor.application.use_cases.session import AdvisorSession
from beauty_advisor.main import configure_logging
from beauty_advisor.wiring.dependencies import get_session


def _print_header(session: AdvisorSession) -> None:
    print("\nLocal Beauty Advisor")
    print("-" * 60)
    print(f"products loaded: {len(session.catalog.products)}")
    print(f"selected: {len(session.selection)}")
    print("Type your message and press Enter.")
    print("Commands: /help, /products [term], /select <id>, /selection, /clear, /routine,")
    print("          /history, /reload, /theme, /quit")
    print("-" * 60)
    for turn in session.context.history:
        print(f"(assistant) {turn.content}")


def _print_products(products) -> None:
    if not products:
        print("(none)")
        return
    for p in products:
        print(f"  [{p.id}] {p.name} by {p.brand} ({p.category})")


def main() -> None:
    configure_logging("WARNING")
    session = get_session()
    _print_header(session)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        cmd, _, arg = user_text.partition(" ")
        cmd = cmd.lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  /products [term] -> list catalog products, optionally filtered")
            print("  /select <id>     -> toggle a product in the selection")
            print("  /selection       -> show selected products")
            print("  /clear           -> clear the selection (asks first)")
            print("  /routine         -> generate a routine from the selection")
            print("  /history         -> show the conversation history")
            print("  /reload          -> reload the catalog and prune the selection")
            print("  /theme           -> toggle light/dark preference")
            print("  /quit            -> exit")
            continue
        if cmd == "/products":
            _print_products(session.catalog.filter(search_term=arg))
            continue
        if cmd == "/select":
            if not arg.strip().isdigit():
                print("Usage: /select <id>")
                continue
            selected = session.toggle_product(int(arg.strip()))
            if selected is None:
                print("Unknown product id.")
            else:
                print("Added to selection." if selected else "Removed from selection.")
            continue
        if cmd == "/selection":
            _print_products(session.selection.products)
            continue
        if cmd == "/clear":
            answer = input("Are you sure you want to clear all selected products? [y/N] ").strip().lower()
            if answer in ("y", "yes"):
                print(session.clear_selection())
            continue
        if cmd == "/routine":
            print("Creating your personalized routine...")
            result = session.routine.generate()
            print(f"\n--- Routine ---\n{result.text}")
            continue
        if cmd == "/history":
            print("\n--- History ---")
            for turn in session.context.history:
                print(f"{turn.role}: {turn.content}")
            continue
        if cmd == "/reload":
            try:
                products = session.reload_catalog()
            except CatalogUnavailable as e:
                print(f"ERROR: {e}")
                continue
            print(f"Reloaded {len(products)} products; {len(session.selection)} selected.")
            continue
        if cmd == "/theme":
            print(f"theme: {session.toggle_theme()}")
            continue

        reply = session.chat.ask(user_text)

        print("\n--- Reply ---")
        if reply.used_web_search:
            print("(enhanced with current web information)")
        print(reply.text.strip() or "(empty reply)")
        if reply.products:
            print("\nRecommended:")
            _print_products(reply.products)
        print("-" * 60)


if __name__ == "__main__":
    main()
