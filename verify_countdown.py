from datetime import datetime, timedelta, timezone

from countdown_app.core.countdown_controller import CountdownController, InvalidDurationError
from countdown_app.core.models import CountdownState
from countdown_app.core.services.notification_scheduler import InMemoryNotificationScheduler
from countdown_app.core.services.settings_store import InMemorySettingsStore
from countdown_app.core.services.tick_scheduler import ManualTickScheduler


def test_countdown_flow():
    print("Initializing CountdownController...")
    now = [datetime(2025, 7, 20, 9, 0, 0, tzinfo=timezone.utc)]
    store = InMemorySettingsStore()
    notifications = InMemoryNotificationScheduler()
    ticks = ManualTickScheduler()
    controller = CountdownController(store, notifications, ticks, clock=lambda: now[0])

    # 1. Reject a too-short duration
    print("Starting with 4m59s...")
    try:
        controller.start(0, 4, 59)
    except InvalidDurationError:
        print("Rejected as expected.")
    else:
        raise AssertionError("299 seconds should be rejected")
    assert store.get("endDate") is None

    # 2. Start one hour
    print("Starting with 1h...")
    assert controller.start(1, 0, 0) == 3600
    assert controller.state is CountdownState.RUNNING
    assert store.get("endDate") == (now[0] + timedelta(hours=1)).isoformat()
    assert notifications.get("timerDone").delay_seconds == 3600
    print("Countdown running.")

    # 3. One second later
    now[0] += timedelta(seconds=1)
    assert controller.tick().as_tuple() == (0, 59, 59)
    print("Tick reports 00:59:59.")

    # 4. Simulated restart
    print("Restoring in a fresh controller...")
    restored = CountdownController(store, notifications, ManualTickScheduler(), clock=lambda: now[0])
    assert restored.restore_on_launch() is CountdownState.RUNNING
    print("Countdown restored.")

    # 5. Expiry
    now[0] += timedelta(hours=1)
    restored.tick()
    assert restored.state is CountdownState.IDLE
    assert store.get("endDate") is None
    print("Countdown expired and cleared.")

    print("\nSUCCESS: Countdown verification passed!")

if __name__ == "__main__":
    test_countdown_flow()
