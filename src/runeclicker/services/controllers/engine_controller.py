"""Frame-driven engine controller that owns the current game snapshot."""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Iterable, List

from runeclicker.core.rng import RNG
from runeclicker.domain.config import DEFAULT_CONFIG, GameConfig
from runeclicker.domain.defs import RuneActiveDef
from runeclicker.domain.events import EngineEvent
from runeclicker.domain.passive_tree import PassiveTree
from runeclicker.domain.rune_build import RuneBuild, is_beam
from runeclicker.domain.state import GameState, create_initial_state, pause, resume, with_loadout
from runeclicker.services.combat_service import CombatService
from runeclicker.services.passive_tree_service import PassiveAllocationResult, PassiveTreeService
from runeclicker.services.world_service import WorldService

logger = logging.getLogger(__name__)

EventListener = Callable[[EngineEvent], None]
UpdateListener = Callable[[GameState], None]

DEFAULT_FRAME_MS = 1000 / 60


class EngineController:
    """
    Scheduler and sole owner of mutable engine state.

    Each ``tick(now)`` derives a new ``GameState`` from the previous one through
    the pure world and combat services and reassigns the single reference held
    here. The host supplies timestamps in milliseconds, normally once per frame.

    Non-responsibilities (handled by presentation layer):
    - Rendering, animation and damage-number display
    - Translating input devices into click / hold calls
    """

    def __init__(
        self,
        config: GameConfig = DEFAULT_CONFIG,
        *,
        rng: RNG | None = None,
        seed: int = 0,
        passive_service: PassiveTreeService | None = None,
        state: GameState | None = None,
    ) -> None:
        self._config = config
        self._rng = rng if rng is not None else RNG(seed)
        self._world = WorldService(config, self._rng)
        self._combat = CombatService(config, self._rng)
        self._passives = passive_service or PassiveTreeService()
        self._state = state if state is not None else create_initial_state(config)
        self._rune_build: RuneBuild | None = self._state.rune_build
        self._passive_tree: PassiveTree | None = self._state.passive_tree
        self._running = False
        self._last_frame_time = 0.0
        self._event_listeners: List[EventListener] = []
        self._update_listeners: List[UpdateListener] = []

    # -----------------------
    # Observation
    # -----------------------

    def get_state(self) -> GameState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._running

    def on_event(self, listener: EventListener) -> None:
        self._event_listeners.append(listener)

    def on_update(self, listener: UpdateListener) -> None:
        self._update_listeners.append(listener)

    def _emit(self, events: Iterable[EngineEvent]) -> None:
        for event in events:
            for listener in self._event_listeners:
                listener(event)

    def _notify(self) -> None:
        for listener in self._update_listeners:
            listener(self._state)

    # -----------------------
    # Lifecycle
    # -----------------------

    def start(self, now: float = 0.0) -> None:
        if self._running:
            return
        self._running = True
        self._last_frame_time = now
        logger.debug("Engine started at %.1fms", now)

    def stop(self) -> None:
        self._running = False

    def pause(self) -> None:
        self._state = pause(self._state)
        self._notify()

    def resume(self) -> None:
        self._state = resume(self._state)
        self._notify()

    def tick(self, now: float) -> GameState:
        """Advance one frame. Does nothing while stopped or paused."""
        if not self._running:
            return self._state
        delta_ms = now - self._last_frame_time
        self._last_frame_time = now
        if self._state.paused:
            return self._state

        state = self._with_loadout(self._state)
        events: List[EngineEvent] = []

        if self._world.should_spawn(state, now):
            step = self._world.spawn_enemy(state, now)
            state = step.state
            events.extend(step.events)

        state = self._world.move_enemies(state, delta_ms)

        step = self._world.resolve_contact(state)
        state = step.state
        events.extend(step.events)

        if not state.paused:
            if is_beam(self._active_rune()):
                outcome = self._combat.handle_beam(state, now)
            elif self._config.auto_attack:
                outcome = self._combat.handle_click(state, now)
            else:
                outcome = None
            if outcome is not None:
                state = outcome.state
                events.extend(outcome.events)

        self._state = state
        self._emit(events)
        self._notify()
        return self._state

    def run(self, frames: int, frame_ms: float = DEFAULT_FRAME_MS, *, start_time: float = 0.0) -> GameState:
        """Drive ``frames`` ticks at a fixed frame time (headless hosts and tests)."""
        self.start(start_time)
        now = self._last_frame_time
        for _ in range(frames):
            now += frame_ms
            self.tick(now)
            if self._state.paused:
                break
        return self._state

    # -----------------------
    # Input
    # -----------------------

    def handle_click(self, now: float) -> None:
        outcome = self._combat.handle_click(self._with_loadout(self._state), now)
        self._state = outcome.state
        self._emit(outcome.events)
        self._notify()

    def handle_mouse_down(self, now: float) -> None:
        if is_beam(self._active_rune()):
            player = replace(self._state.player, is_holding_attack=True, last_attack_time=now)
            self._state = replace(self._state, player=player)
            self._notify()
            return
        self.handle_click(now)

    def handle_mouse_up(self) -> None:
        if not self._state.player.is_holding_attack:
            return
        player = replace(self._state.player, is_holding_attack=False, last_dot_time=None)
        self._state = replace(self._state, player=player)
        self._notify()

    # -----------------------
    # Loadout
    # -----------------------

    def update_rune_build(self, build: RuneBuild | None) -> None:
        self._rune_build = build
        self._state = self._with_loadout(self._state)

    def update_passive_tree(self, tree: PassiveTree | None) -> None:
        self._passive_tree = tree
        self._state = self._with_loadout(self._state)

    def allocate_passive(self, node_id: str) -> PassiveAllocationResult:
        """Allocate against the player's earned passive points."""
        if self._passive_tree is None:
            raise ValueError("Passive tree is not initialized.")
        result = self._passives.allocate(self._passive_tree, node_id, self._state.player.passive_points)
        if result.success:
            self.update_passive_tree(result.tree)
        return result

    def deallocate_passive(self, node_id: str) -> PassiveAllocationResult:
        if self._passive_tree is None:
            raise ValueError("Passive tree is not initialized.")
        result = self._passives.deallocate(self._passive_tree, node_id, self._state.player.passive_points)
        if result.success:
            self.update_passive_tree(result.tree)
        return result

    def _active_rune(self) -> RuneActiveDef | None:
        return self._rune_build.active if self._rune_build else None

    def _with_loadout(self, state: GameState) -> GameState:
        return with_loadout(state, passive_tree=self._passive_tree, rune_build=self._rune_build)
