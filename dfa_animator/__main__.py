# dfa_animator/__main__.py
"""
Headless runner: animates a library automaton on the console.

    python -m dfa_animator --list
    python -m dfa_animator --name "Ends with a" --input abba --speed 200
    python -m dfa_animator --category binary-divisibility --export out/
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from PyQt6.QtCore import QCoreApplication, QTimer

from .core.dfa_ir import Automaton
from .managers.library_manager import AutomatonLibrary
from .managers.playback_controller import PlaybackController, PlaybackState
from .managers.plugin_manager import PluginManager
from .utils import config
from .utils.logging_setup import setup_global_logging

logger = logging.getLogger("dfa_animator.cli")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="dfa_animator", description=f"{config.APP_NAME} {config.APP_VERSION}")
    parser.add_argument("--list", action="store_true", help="List the library automata and exit")
    parser.add_argument("--category", type=str, default=None, help="Library category key, e.g. basic-patterns")
    parser.add_argument("--name", type=str, default=None, help="Automaton name; defaults to the first in the category")
    parser.add_argument("--input", type=str, default=None, help="String to simulate once construction is complete")
    parser.add_argument("--speed", type=int, default=config.DEFAULT_ANIMATION_SPEED_MS, help="Delay between steps in ms")
    parser.add_argument("--no-auto-play", action="store_true", help="Show the finished automaton instead of building it step by step")
    parser.add_argument("--export", metavar="PATH", default=None, help="Write the automaton as JSON to PATH (file or directory) and exit")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def _print_library(library: AutomatonLibrary):
    for key, display_name in library.categories():
        print(f"{display_name} [{key}]")
        for automaton in library.automata(key):
            print(f"  - {automaton.name}: {automaton.description}")


def _select_automaton(library: AutomatonLibrary, category: Optional[str], name: Optional[str]) -> Optional[Automaton]:
    if name:
        return library.get(category, name) if category else library.find(name)
    keys = [category] if category else [key for key, _ in library.categories()]
    for key in keys:
        automata = library.automata(key)
        if automata:
            return automata[0]
    return None


def _export(automaton: Automaton, path: str) -> int:
    files = PluginManager().export_automaton(automaton)
    for filename, content in files.items():
        target = os.path.join(path, filename) if os.path.isdir(path) else path
        try:
            with open(target, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Could not write '{target}': {e}", exc_info=True)
            return 1
        logger.info(f"Exported '{automaton.name}' to '{target}'.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_global_logging(getattr(logging, args.log_level))

    library = AutomatonLibrary()
    if args.list:
        _print_library(library)
        return 0

    automaton = _select_automaton(library, args.category, args.name)
    if automaton is None:
        logger.error(f"No automaton found (category={args.category!r}, name={args.name!r}).")
        return 1

    if args.export:
        return _export(automaton, args.export)

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    controller = PlaybackController()
    try:
        controller.set_speed(args.speed)
    except ValueError as e:
        logger.error(str(e))
        return 1
    controller.set_auto_play(not args.no_auto_play)

    controller.guideUpdated.connect(lambda text: logger.info(text))
    controller.outputPosted.connect(lambda message, level: logger.info(f"[{level}] {message}"))
    controller.simulationEventRendered.connect(
        lambda event, highlight: logger.debug(f"Highlight: {highlight}")
    )

    def on_state_changed(state: PlaybackState):
        if state is PlaybackState.CONSTRUCTION_COMPLETE:
            if args.input is None:
                app.exit(0)
            elif not controller.run_simulation(args.input):
                app.exit(1)
        elif state is PlaybackState.SIMULATION_COMPLETE:
            app.exit(0)

    def start():
        if not controller.load(automaton):
            app.exit(1)
            return
        if args.no_auto_play:
            controller.reset_visualization()

    controller.playbackStateChanged.connect(on_state_changed)
    controller.errorOccurred.connect(lambda error: logger.debug(f"Error signalled: {type(error).__name__}"))
    # Start inside the event loop so an immediate exit() is not lost.
    QTimer.singleShot(0, start)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
