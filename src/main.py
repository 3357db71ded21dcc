"""
Command-line entry point: render a rule modifier or list the modifier keywords.
"""

import sys
import argparse
from typing import List, Optional

from core.utils import debug, error
from openinghours.modifier import InvalidModifierError, ModifierKind, RuleModifier


def main(
    modifier: Optional[str] = None,
    comment: Optional[str] = None,
    list_modifiers: bool = False,
) -> int:
    """Main entry point."""
    if list_modifiers:
        for spelling in ModifierKind.all_spellings():
            print(spelling)
        return 0

    rule_modifier = RuleModifier()
    try:
        rule_modifier.set_kind(modifier)
    except InvalidModifierError as e:
        error(str(e))
        debug(f"valid modifiers: {', '.join(ModifierKind.all_spellings())}")
        return 1
    rule_modifier.set_comment(comment)

    print(rule_modifier.render())
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render opening hours rule modifiers")
    parser.add_argument("-m", "--modifier", metavar="TOKEN", help="Modifier keyword (open/closed/off/unknown)")
    parser.add_argument("-c", "--comment", metavar="TEXT", help="Rule comment, without surrounding quotes")
    parser.add_argument("--list-modifiers", action="store_true", help="List all modifier keywords")
    return parser


def cli(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    return main(
        modifier=args.modifier,
        comment=args.comment,
        list_modifiers=args.list_modifiers,
    )


if __name__ == "__main__":
    sys.exit(cli())
