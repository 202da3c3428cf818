#!/usr/bin/env python3
"""
Coverage test runner for the grid games engines
Runs the test suite under pytest-cov and optionally opens the HTML report
"""

import argparse
import subprocess
import sys
import webbrowser
from pathlib import Path


def run_coverage(open_report=True, extra_args=None):
    """Run tests with coverage over the gridgames package"""
    print("🧪 Running grid games tests with coverage...")
    print("=" * 50)

    cmd = [
        sys.executable, "-m", "pytest",
        "tests/",
        "--cov=gridgames",
        "--cov-report=term-missing",
        "--cov-report=html:htmlcov",
        "-v"
    ] + list(extra_args or [])

    try:
        result = subprocess.run(cmd, check=False)
    except FileNotFoundError:
        print("❌ Error: Python or pytest not found")
        return False

    if result.returncode == 0:
        print("\n✅ All tests passed!")
    else:
        print(f"\n❌ Some tests failed (exit code: {result.returncode})")

    html_report = Path("htmlcov/index.html")
    if html_report.exists():
        print(f"\n📊 Coverage report generated: {html_report.absolute()}")
        if open_report:
            try:
                response = input("\nOpen HTML coverage report in browser? (y/n): ").strip().lower()
                if response in ['y', 'yes']:
                    webbrowser.open(f"file://{html_report.absolute()}")
                    print("🌐 Coverage report opened in browser")
            except (KeyboardInterrupt, EOFError):
                print("\n👋 Exiting...")

    return result.returncode == 0


def main():
    parser = argparse.ArgumentParser(description="Run the grid games test suite with coverage")
    parser.add_argument('--no-browser', action='store_true',
                        help='Do not offer to open the HTML report')
    parser.add_argument('pytest_args', nargs='*',
                        help='Extra arguments passed through to pytest, e.g. -k sudoku')
    args = parser.parse_args()

    success = run_coverage(open_report=not args.no_browser, extra_args=args.pytest_args)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
