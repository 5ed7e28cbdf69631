from .models import Option, Scene


class OptionIndexError(IndexError):
    """The client picked an option the scene does not have (script out of sync)."""


def resolve_choice(scene: Scene, option_index: int) -> Option:
    """
    Return the authored option at option_index, unchanged.

    Negative indices are rejected rather than counted from the end.
    """
    if option_index < 0 or option_index >= len(scene.options):
        raise OptionIndexError(
            f"Scene {scene.position} has {len(scene.options)} option(s); got index {option_index}"
        )
    return scene.options[option_index]
