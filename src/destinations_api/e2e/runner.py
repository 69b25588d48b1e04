"""
Run the end-to-end specs against a live Destinations API.

Usage:
    destinations-e2e [--base-url URL] [--spec GLOB] [--root DIR] [pytest args...]

Examples:
    # Against a local server started with `destinations-api`
    destinations-e2e

    # Against staging, verbose
    destinations-e2e --base-url https://destinations-staging.example.com -v
"""
import argparse
import os
import sys
from pathlib import Path

import pytest

from destinations_api.e2e.config import BASE_URL_ENV, E2EConfig, load_e2e_config


def find_specs(root: str | Path, pattern: str) -> list[Path]:
    """Return the spec files under `root` matching `pattern`, sorted."""
    return sorted(p for p in Path(root).glob(pattern) if p.is_file())


def build_pytest_args(config: E2EConfig, specs: list[Path], extra: list[str]) -> list[str]:
    """Translate the runner config into a pytest command line."""
    args = [str(p) for p in specs]
    if config.support_file is False:
        args.append("--noconftest")
    elif isinstance(config.support_file, str):
        args.extend(["-p", config.support_file])
    return args + list(extra)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run end-to-end specs against the Destinations API")
    parser.add_argument("--base-url", help="Override the configured base URL")
    parser.add_argument("--spec", help="Override the configured spec glob")
    parser.add_argument("--root", default=".", help="Project root holding pyproject.toml (default: cwd)")
    args, extra = parser.parse_known_args(argv)

    overrides = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.spec is not None:
        overrides["spec_pattern"] = args.spec
    try:
        config = load_e2e_config(args.root)
        # rebuilt rather than model_copy(update=...) so overrides are validated
        config = E2EConfig(**{**config.model_dump(), **overrides})
    except ValueError as exc:
        parser.error(str(exc))

    specs = find_specs(args.root, config.spec_pattern)
    if not specs:
        print(f"No e2e specs match {config.spec_pattern!r} under {Path(args.root).resolve()}")
        return int(pytest.ExitCode.NO_TESTS_COLLECTED)

    print(f"Running {len(specs)} e2e spec file(s) against {config.base_url}")
    os.environ[BASE_URL_ENV] = config.base_url
    return int(pytest.main(build_pytest_args(config, specs, extra)))


if __name__ == "__main__":
    sys.exit(main())
