import asyncio
import logging

from regime_engine.autoplay.controller import AutoplayController
from regime_engine.catalog.catalog import RegimeCatalog
from regime_engine.config import Config
from regime_engine.core.event_bus import EventBus
from regime_engine.layout.geometry import layout_for, regime_positions
from regime_engine.logging_system.logging_setup import setup_logging
from regime_engine.transitions.animator import TransitionAnimator
from regime_engine.transitions.navigator import RegimeNavigator
from regime_engine.view.presenter import RegimePresenter, format_panel


async def run_loop() -> None:
    """
    Headless session of the regime visualizer.

    Wires configuration, logging, the event bus, the catalog, the autoplay
    controller, the navigator and the presenter, then lets autoplay run for
    SESSION_DURATION_SECONDS (or until interrupted when it is 0).
    """
    config = Config.from_env()
    setup_logging()
    log = logging.getLogger("main")
    log.info(
        "Starting regime session interval=%.0fms step_delay=%.0fms start=%s reduced_motion=%s layout=%s",
        config.autoplay_interval_ms,
        config.step_delay_ms,
        config.start_regime,
        config.prefers_reduced_motion,
        config.layout_variant,
    )

    catalog = RegimeCatalog()
    event_bus = EventBus()
    bus_task = asyncio.create_task(event_bus.run())

    layout = layout_for(config.layout_variant)
    for regime, (x, y) in zip(catalog.order(), regime_positions(layout.arc)):
        log.info("Node %s at (%.1f, %.1f) in viewBox %s", regime.value, x, y, layout.view_box)

    controller = AutoplayController.from_config(config, catalog=catalog, event_bus=event_bus)
    navigator = RegimeNavigator(
        controller,
        animator=TransitionAnimator(config.step_delay_ms),
        catalog=catalog,
        event_bus=event_bus,
    )
    presenter = RegimePresenter(controller, navigator=navigator, catalog=catalog, event_bus=event_bus)
    log.info("Initial view:\n%s", format_panel(presenter.snapshot()))

    try:
        async with controller:
            if config.session_duration_seconds > 0:
                await asyncio.sleep(config.session_duration_seconds)
            else:
                await asyncio.Event().wait()
    except asyncio.CancelledError:
        log.info("Session cancelled")
    finally:
        bus_task.cancel()
        try:
            await bus_task
        except asyncio.CancelledError:
            pass
        await event_bus.dispatch_pending()
        log.info("Session finished after %d regime changes", len(presenter.history))


def main() -> None:
    try:
        asyncio.run(run_loop())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
