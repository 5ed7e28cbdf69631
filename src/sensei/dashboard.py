"""Read-only home screen data (streak, XP, modules, profile).

There is no progress tracking: the snapshot is fixed mock data and is never
written to.
"""

from .models import DashboardState, LearningModule, Profile

_DEFAULT_STATE = DashboardState(
    streak_days=5,
    xp=1200,
    current_lesson="Greetings 1 - Jakarta",
    modules=[
        LearningModule(id="1", title="Greetings 1 - Jakarta", icon="👋", done=False, color="#06b6d4"),
        LearningModule(id="2", title="Numbers - Bali", icon="🔢", done=True, color="#f59e0b"),
    ],
    profile=Profile(display_name="Wira", username="@DeeDotz", level=12, progress=0.62),
)


def get_dashboard_state() -> DashboardState:
    """Return a copy of the snapshot so callers cannot alter the shared one."""
    return _DEFAULT_STATE.model_copy(deep=True)
