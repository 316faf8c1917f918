"""Chinese rings (Baguenaudier) solved as a breadth-first search over ring states."""

from collections import deque
from typing import Dict, List, Optional, Sequence, Tuple

from app.core.errors import InvalidRingCountError

State = Tuple[bool, ...]


def can_toggle(state: Sequence[bool], k: int) -> bool:
    """
    Ring k may move if it is the first ring, or if ring k-1 is engaged
    and every ring before k-1 is disengaged. Same rule both ways.
    """
    if k == 0:
        return True
    return state[k - 1] and not any(state[:k - 1])


def legal_moves(state: State) -> List[State]:
    """Successor states, lowest toggled index first."""
    successors = []
    for k in range(len(state)):
        if can_toggle(state, k):
            successors.append(state[:k] + (not state[k],) + state[k + 1:])
    return successors


def minimal_move_count(n: int) -> int:
    """Number of toggles on the shortest sequence for n rings."""
    return (2 ** (n + 1)) // 3


def solve_rings(n: int) -> List[List[bool]]:
    """
    Shortest sequence of ring states from all disengaged to all engaged,
    both ends included.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise InvalidRingCountError(n)

    start: State = (False,) * n
    goal: State = (True,) * n

    parents: Dict[State, Optional[State]] = {start: None}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        if state == goal:
            break
        for successor in legal_moves(state):
            if successor not in parents:
                parents[successor] = state
                queue.append(successor)

    # the legal-move graph is connected, so the goal is always reached
    sequence = []
    state = goal
    while state is not None:
        sequence.append(list(state))
        state = parents[state]
    sequence.reverse()
    return sequence
