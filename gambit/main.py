#!/usr/bin/env python3
"""
GAMBIT - Combo Sandbox
======================
Entry point. Boots the plugin against the sandbox host and either opens
the play-test window or runs a scripted demo.

Run: python -m gambit [--headless-demo] [--log-dir DIR]
"""

import argparse
import logging
from typing import List, Optional

from .config import (
    PLUGIN_NAME, PLUGIN_VERSION, HitFlag, MessageType,
    AV_HEALTH, AV_STAMINA, FORM_HUNTING_BOW
)
from .log import setup_logging
from .plugin import GambitPlugin
from .sandbox import SandboxHost

logger = logging.getLogger(__name__)

# (label, steps) where each step is one of the host actions below
DEMO_SCRIPT = [
    ("Deft Strike", ["melee", "melee", "power"]),
    ("Defensive Strike", ["bash", "bash", "power"]),
    ("Perseverance", ["melee", "melee", "bash", "power"]),
    ("The Boot", ["melee", "bash", "melee", "power"]),
    ("Unmapped", ["bash", "melee", "power"]),
    ("Bow is not a builder", ["bow", "melee", "melee", "power"]),
    ("Chain cap", ["melee"] * 7 + ["power"]),
    ("Nothing built", ["power"]),
]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gambit",
        description=f"{PLUGIN_NAME} v{PLUGIN_VERSION} - melee combo cashouts",
    )
    parser.add_argument("--log-dir", default=None,
                        help="Directory for Gambit.log (default: ./logs)")
    parser.add_argument("--headless-demo", action="store_true",
                        help="Run the scripted demo without opening a window")
    return parser


def boot(host: Optional[SandboxHost] = None) -> GambitPlugin:
    """Create the plugin and a sandbox session"""
    host = host or SandboxHost()
    plugin = GambitPlugin()
    plugin.load(host)
    host.start_session(MessageType.NEW_GAME)
    return plugin


def run_demo(plugin: GambitPlugin) -> List[str]:
    """Play DEMO_SCRIPT through the host. Return one summary line per entry."""
    host = plugin.host
    lines = []
    for label, steps in DEMO_SCRIPT:
        for step in steps:
            if step == "melee":
                host.player_hit()
            elif step == "bash":
                host.player_hit(flags=HitFlag.BASH_ATTACK)
            elif step == "bow":
                host.player_hit(FORM_HUNTING_BOW)
            elif step == "power":
                host.player_power_attack()

        result = plugin.dispatcher.last_result
        player = host.player()
        lines.append(
            f"{label:<22} -> {result.combo_id if result else 0:<7} "
            f"{(result.name if result else '') or '-':<18} "
            f"HP {player.health:.0f} SP {player.stamina:.0f} "
            f"graph {len(player.graph_events)}"
        )
        plugin.dispatcher.last_result = None
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    args = build_parser().parse_args(argv)
    log_file = setup_logging(args.log_dir)

    print(f"\n{'=' * 60}")
    print(f"  {PLUGIN_NAME} v{PLUGIN_VERSION}")
    print(f"{'=' * 60}\n")
    print(f"Log: {log_file}")

    host = SandboxHost()
    plugin = boot(host)
    logger.info("Sandbox session %d ready", host.session_count)

    if args.headless_demo:
        host.player().damage_actor_value(AV_HEALTH, 40)
        host.player().damage_actor_value(AV_STAMINA, 70)
        for line in run_demo(plugin):
            print(line)
        return 0

    from .sandbox.app import SandboxApp

    try:
        SandboxApp(plugin, host).run()
    except KeyboardInterrupt:
        print("\nSandbox stopped by user.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
