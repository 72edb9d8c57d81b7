#!/usr/bin/env python3
"""
Проверка качества curl-client-core: black, ruff, mypy, pytest.

Usage:
    python scripts/check.py
    python scripts/check.py --fast        # без mypy
    python scripts/check.py --fix         # black и ruff с исправлениями
    python scripts/check.py --skip-tests  # только линтеры
"""

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List, Tuple

ROOT_DIR = Path(__file__).resolve().parent.parent
SRC_DIR = ROOT_DIR / "src"
TESTS_DIR = ROOT_DIR / "tests"

GREEN = '\033[92m'
RED = '\033[91m'
YELLOW = '\033[93m'
BOLD = '\033[1m'
END = '\033[0m'


def build_checks(args: argparse.Namespace) -> List[Tuple[str, List[str]]]:
    """Список (название, команда) с учётом флагов."""
    paths = [str(SRC_DIR), str(TESTS_DIR)]

    black = ["black", *paths] if args.fix else ["black", "--check", *paths]
    ruff = ["ruff", "check", *paths] + (["--fix"] if args.fix else [])
    checks = [("Black", black), ("Ruff", ruff)]

    if not args.fast:
        checks.append(("Mypy", ["mypy", str(SRC_DIR / "curl_client"), "--ignore-missing-imports"]))
    if not args.skip_tests:
        checks.append(("Pytest", ["pytest", "--cov=curl_client", "--cov-report=term-missing"]))
    return checks


def run_check(name: str, command: List[str]) -> bool:
    print(f"\n{BOLD}▶ {name}: {' '.join(command)}{END}")
    try:
        result = subprocess.run(command, cwd=ROOT_DIR, capture_output=True, text=True)
    except FileNotFoundError:
        print(f"{YELLOW}⚠ {command[0]} не установлен - пропущено{END}")
        return True

    if result.returncode == 0:
        print(f"{GREEN}✓ {name} - OK{END}")
        return True

    print(f"{RED}✗ {name} - FAILED{END}")
    print((result.stdout + result.stderr)[-2000:])
    return False


def main() -> int:
    parser = argparse.ArgumentParser(description="Проверка качества кода")
    parser.add_argument("--fast", action="store_true", help="Без mypy")
    parser.add_argument("--fix", action="store_true", help="Автоматические исправления")
    parser.add_argument("--skip-tests", action="store_true", help="Пропустить тесты")
    args = parser.parse_args()

    results = [(name, run_check(name, command)) for name, command in build_checks(args)]

    print(f"\n{BOLD}{'=' * 40}\n  ИТОГ\n{'=' * 40}{END}")
    for name, success in results:
        print(f"{GREEN + '✓ PASSED' if success else RED + '✗ FAILED'}{END}  {name}")

    return 0 if all(success for _, success in results) else 1


if __name__ == "__main__":
    sys.exit(main())
