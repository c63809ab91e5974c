#!/usr/bin/env python3
"""
hostbind command-line interface

Inspect the configuration and evaluate check expressions inside a fresh
embedding instance.
"""

import argparse
import logging
import sys

from hostbind import __version__
from hostbind.common.config import get_config, init_config
from hostbind.common.errors import HostBindError
from hostbind.binding.registry import new_module
from hostbind.embedding.bridge import BUNDLED_AUX_DIR, aux_search_paths, load_auxiliary_code, synchronize_namespaces
from hostbind.embedding.interpreter import ScopedInterpreter


def show_info():
    """Show version, configuration and bundled auxiliary code"""
    config = get_config()
    print(f"hostbind {__version__}")
    print("=" * 50)

    print("\nConfiguration:")
    print(f"  • clone_method: {config.clone_method}")
    print(f"  • aux_file_pattern: {config.aux_file_pattern}")
    print(f"  • log_level: {config.log_level}")

    print("\nAuxiliary code search path:")
    for directory in aux_search_paths():
        print(f"  • {directory}")

    print("\nBundled auxiliary files:")
    for path in sorted(BUNDLED_AUX_DIR.glob(config.aux_file_pattern.format(name = "*"))):
        print(f"  • {path.name}")


def run_checks(module_name: str, expressions: list[str]) -> int:
    """Evaluate each expression in module's namespace; return exit status"""
    failed = 0

    with ScopedInterpreter() as interp:
        module = new_module(module_name)
        try:
            path = load_auxiliary_code(module)
            synchronize_namespaces(module)

        except HostBindError as e:
            print(f"❌ {e}")
            return 1

        print(f"🔍 {module_name} <- {path}")

        for expr in expressions:
            try:
                value = interp.evaluate(expr, module)

            except Exception as e:
                print(f"❌ {expr}: {type(e).__name__}: {e}")
                failed += 1
                continue

            if value:
                print(f"✅ {expr}")
            else:
                print(f"❌ {expr}: {value!r}")
                failed += 1

    print(f"\n{len(expressions) - failed}/{len(expressions)} passed")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hostbind',
        description='Copy, clone and keyword-construction adapters for host value types'
    )

    parser.add_argument('--config', help='Path to config file')
    parser.add_argument('--aux-path', action='append', help='Extra auxiliary code directory (repeatable)')
    parser.add_argument('--log-level', type=str.upper, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # info
    subparsers.add_parser('info', help='Show configuration and auxiliary code')

    # check
    check_parser = subparsers.add_parser('check', help='Evaluate expressions in a module namespace')
    check_parser.add_argument('module', help='Target module name, e.g. hostbind.testing')
    check_parser.add_argument('expressions', nargs='+', help='Expressions that must evaluate to true')

    return parser


def main(argv: list[str] = None) -> int:
    """Main entry point"""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    init_config(argv)
    logging.basicConfig(level = get_config().log_level)

    if args.command == 'check':
        return run_checks(args.module, args.expressions)

    show_info()
    return 0


if __name__ == '__main__':
    sys.exit(main())
