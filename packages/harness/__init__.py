from .core import solve_state, solve_batch, play_game
from .io import write_csv, write_manifest
from .snapshot import load_state, save_state, state_from_dict, state_to_dict

__all__ = [
    "solve_state", "solve_batch", "play_game",
    "write_csv", "write_manifest",
    "load_state", "save_state", "state_from_dict", "state_to_dict",
]
