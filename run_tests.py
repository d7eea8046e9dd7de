#!/usr/bin/env python3
"""
Test runner script for the jp-prefecture project.

Runs the pytest suite under tests/, optionally with coverage reporting or
restricted to a single test file.
"""

import sys
import subprocess
import argparse


def run_command(cmd, description=""):
    """Run a command and return whether it succeeded."""
    print(f"\n{'='*60}")
    if description:
        print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*60}")

    result = subprocess.run(cmd, check=False)
    print(f"\nExit code: {result.returncode}")
    return result.returncode == 0


def run_all_tests():
    cmd = [sys.executable, "-m", "pytest", "tests", "-v", "--tb=short"]
    return run_command(cmd, "All Tests")


def run_coverage_tests():
    """Run tests with coverage reporting."""
    cmd = [sys.executable, "-m", "pytest", "tests", "--cov=jp_prefecture",
           "--cov-report=html", "--cov-report=term-missing", "-v"]
    success = run_command(cmd, "Coverage Tests")

    if success:
        print("\nCoverage report generated in htmlcov/index.html")

    return success


def run_specific_test(test_file):
    cmd = [sys.executable, "-m", "pytest", test_file, "-v"]
    return run_command(cmd, f"Specific Test: {test_file}")


def check_test_environment():
    """Check if the test environment is properly set up."""
    print("Checking test environment...")
    print(f"Python version: {sys.version}")

    missing_packages = []
    for package in ['pandas', 'rapidfuzz', 'tqdm', 'pytest', 'jp_prefecture']:
        try:
            __import__(package)
            print(f"+ {package} is available")
        except ImportError:
            print(f"- {package} is missing")
            missing_packages.append(package)

    try:
        __import__('pytest_cov')
        print("+ pytest_cov is available (optional)")
    except ImportError:
        print("- pytest_cov is not available (optional)")

    if missing_packages:
        print(f"\nMissing required packages: {', '.join(missing_packages)}")
        print("Please install them using: pip install -e .[test]")
        return False

    print("\nTest environment is ready")
    return True


def main():
    """Main test runner function."""
    parser = argparse.ArgumentParser(description="jp-prefecture Test Runner")
    parser.add_argument("--type", choices=["all", "coverage"], default="all",
                        help="Type of test run")
    parser.add_argument("--file", help="Run specific test file")
    parser.add_argument("--check-env", action="store_true", help="Check test environment")

    args = parser.parse_args()

    if args.check_env:
        return 0 if check_test_environment() else 1

    if not check_test_environment():
        print("\nTest environment check failed. Please fix the issues above.")
        return 1

    if args.file:
        success = run_specific_test(args.file)
    elif args.type == "coverage":
        success = run_coverage_tests()
    else:
        success = run_all_tests()

    if success:
        print("\nAll tests completed successfully!")
        return 0

    print("\nSome tests failed. Please check the output above.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
