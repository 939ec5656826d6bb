"""Entry point for the fixed timestep loop demos."""
from __future__ import annotations

from pathlib import Path

import pygame

from gameloop.demo.bouncer import BouncerScene
from gameloop.demo.console import ConsoleDemo
from gameloop.engine.input import InputBindings, QuitInput
from gameloop.engine.logger import GameLogger, init_logger
from gameloop.engine.loop import FixedTimestepLoop
from gameloop.engine.settings import LoopSettings
from gameloop.engine.telemetry import LoopTelemetry


SETTINGS_PATH = Path("settings.json")


def run_console(settings: LoopSettings, logger: GameLogger, telemetry: LoopTelemetry) -> None:
    if settings.clock == "pygame":
        pygame.init()
    demo = ConsoleDemo(
        logger.channel("demo"),
        duration=settings.demo_duration,
        clock=settings.clock_source(),
    )
    loop = demo.build(
        settings.target_fps,
        settings.idle_threshold,
        telemetry=telemetry,
        loop_logger=logger.channel("loop"),
    )
    try:
        loop.run()
    finally:
        if settings.clock == "pygame":
            pygame.quit()


def run_bouncer(settings: LoopSettings, logger: GameLogger, telemetry: LoopTelemetry) -> None:
    pygame.init()
    try:
        screen = pygame.display.set_mode(settings.resolution)
        pygame.display.set_caption("Fixed timestep demo")
        scene = BouncerScene(
            screen,
            pygame.time.Clock(),
            max_fps=settings.max_fps,
            logger=logger.channel("demo"),
        )
        process_input = QuitInput(InputBindings.load(SETTINGS_PATH), logger=logger.channel("input"))
        config = settings.to_config(
            settings.clock_source(),
            process_input,
            scene.update,
            scene.render,
            interpolate=True,
        )
        FixedTimestepLoop(config, telemetry=telemetry, logger=logger.channel("loop")).run()
    finally:
        pygame.quit()


def main() -> None:
    settings = LoopSettings.from_settings(SETTINGS_PATH)
    logger = init_logger(SETTINGS_PATH)
    telemetry = LoopTelemetry()

    try:
        if settings.demo == "console":
            run_console(settings, logger, telemetry)
        else:
            run_bouncer(settings, logger, telemetry)
    finally:
        snapshot = telemetry.snapshot()
        print(
            f"\nIterations: {snapshot.iterations}  renders: {snapshot.renders}  "
            f"updates: {snapshot.updates}  stalls: {snapshot.stalls}  "
            f"simulated: {snapshot.simulated_time:.2f}s"
        )


if __name__ == "__main__":
    main()
