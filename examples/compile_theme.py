#!/usr/bin/env python3
"""
Example: Compiling a Theme.

This demonstrates how theme values, groups, component styles and variants
compile into a single theme object. Values are created through the factory,
so repeated names get numeric suffixes.

Usage:
    python examples/compile_theme.py
"""

import json

from chuk_mcp_theme import (
    ThemeError,
    compile_theme,
    create_group,
    create_token,
    create_variant,
)
from chuk_mcp_theme.compiler import summarize_theme


def main() -> None:
    """Demonstrate theme compilation."""
    print("CHUK Theme Compiler Demo")
    print("=" * 40)
    print()

    # Create some theme values
    tokens = []
    primary = create_token(tokens, "color", {"name": "Primary", "value": "#0055FF"})
    tokens.append(primary)
    accent = create_token(tokens, "color", {"name": "Primary", "value": "#FF5500"})
    tokens.append(accent)
    for step in [32, 4, 16, 8]:
        tokens.append(create_token(tokens, "space", {"value": step}))
    body = create_token(tokens, "font", {"name": "Body", "value": "Inter, sans-serif"})
    tokens.append(body)

    print("Theme values:")
    for token in tokens:
        print(f"  {token.type.value:<10} {token.name or '-':<12} {token.value}")
    print()

    # Group the colors
    brand = create_group([], "color", {"name": "Brand", "members": [primary.id, accent.id]})

    # Default button styles and a variant
    components = {"button": {"color": primary.id, "fontFamily": body.id}}
    loud = create_variant(
        [],
        "button",
        {
            "name": "Loud",
            "styles": {
                "bg": accent.id,
                "textTransform": "uppercase",
                "&:hover": {"bg": primary.id},
            },
        },
    )

    try:
        theme = compile_theme(tokens, groups=[brand], components=components, variants=[loud])
    except ThemeError as e:
        print(f"Compilation failed: {e}")
        return

    print("Non-empty buckets:")
    for bucket, count in summarize_theme(theme).items():
        print(f"  {bucket}: {count}")
    print()

    print("Buttons:")
    print(json.dumps(theme["buttons"], indent=2))


if __name__ == "__main__":
    main()
