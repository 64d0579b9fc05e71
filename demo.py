"""Hash random lowercase strings and print sample digests.

For each length 1..max_length a random string is drawn from the alphabet,
hashed as UTF-8, and printed as `HASH: <hex digest>`. Settings come from an
optional YAML config file, overridden by command line flags.

Usage:
    python demo.py
    python demo.py --max-length 80 --seed 7
    python demo.py --config demo.yaml --output samples.yaml

Config file keys (all optional):
    max_length: 39
    seed: 1234
    alphabet: abcdefghijklmnopqrstuvwxyz
    output: samples.yaml
"""

from __future__ import annotations

import argparse
import random
import string
import sys
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional

import yaml

from errors import ConfigError, Sha256Error
from sha256 import compute_hash_hex


@dataclass
class DemoConfig:
    max_length: int = 39
    seed: Optional[int] = None
    alphabet: str = string.ascii_lowercase
    output: Optional[str] = None

    def validate(self) -> None:
        if isinstance(self.max_length, bool) or not isinstance(self.max_length, int):
            raise ConfigError(f"max_length must be an integer, got {self.max_length!r}")
        if self.max_length < 1:
            raise ConfigError(f"max_length must be at least 1, got {self.max_length}")
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")
        if not isinstance(self.alphabet, str) or not self.alphabet:
            raise ConfigError("alphabet must be a non-empty string")
        try:
            self.alphabet.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ConfigError(f"alphabet is not valid UTF-8 text: {e}") from e
        if self.output is not None and not isinstance(self.output, str):
            raise ConfigError(f"output must be a file path, got {self.output!r}")


def load_config(
    path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None
) -> DemoConfig:
    """Load DemoConfig from a YAML file, then apply non-None overrides."""
    data: Dict[str, Any] = {}
    if path is not None:
        with open(path, encoding="utf-8") as f:
            try:
                loaded = yaml.safe_load(f) or {}
            except (yaml.YAMLError, UnicodeDecodeError) as e:
                raise ConfigError(f"Invalid config file {path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        data.update(loaded)

    known = {f.name for f in fields(DemoConfig)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})

    config = DemoConfig(**data)
    config.validate()
    return config


def random_string(rng: random.Random, length: int, alphabet: str) -> str:
    return "".join(rng.choice(alphabet) for _ in range(length))


def run_demo(config: DemoConfig) -> List[Dict[str, str]]:
    """Print one `HASH:` line per sample and return the samples."""
    rng = random.Random(config.seed)
    samples: List[Dict[str, str]] = []

    for length in range(1, config.max_length + 1):
        message = random_string(rng, length, config.alphabet)
        digest_hex = compute_hash_hex(message.encode("utf-8"))
        print(f"HASH: {digest_hex}")
        samples.append({"message": message, "digest_hex": digest_hex})

    return samples


def write_report(path: str, config: DemoConfig, samples: List[Dict[str, str]]) -> None:
    report = {
        "max_length": config.max_length,
        "seed": config.seed,
        "alphabet": config.alphabet,
        "total_samples": len(samples),
        "samples": samples,
    }
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(report, f, default_flow_style=False, sort_keys=False)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print SHA-256 digests of random lowercase strings"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML config file",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=None,
        help="Longest sample string; one sample per length from 1 (default: 39)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible samples",
    )
    parser.add_argument(
        "--alphabet",
        type=str,
        default=None,
        help="Characters to draw samples from (default: a-z)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the samples to this YAML file",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(
            args.config,
            {
                "max_length": args.max_length,
                "seed": args.seed,
                "alphabet": args.alphabet,
                "output": args.output,
            },
        )
        samples = run_demo(config)
        if config.output is not None:
            write_report(config.output, config, samples)
    except (Sha256Error, OSError, yaml.YAMLError) as e:
        sys.stderr.write(f"An error occurred: {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
