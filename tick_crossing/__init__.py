"""tick-crossing - Fixed-step simulation core for a grid road-and-river crossing game."""
from __future__ import annotations

from tick_crossing.clock import Clock, FixedStepDriver
from tick_crossing.collision import covered, occupancy, occupied_cells, on_segment, resolve
from tick_crossing.commands import (
    DOWN,
    LEFT,
    RIGHT,
    UP,
    CommandRouter,
    Continue,
    Move,
    Pause,
    Restart,
    Resume,
    Start,
    TogglePause,
)
from tick_crossing.config import DEFAULT_CONFIG, GameConfig
from tick_crossing.engine import Engine
from tick_crossing.game import Game
from tick_crossing.lanes import LAYOUT, Item, Lane, LaneSpec, build_lanes, validate_layout
from tick_crossing.machine import TRANSITIONS, Guards, StateMachine
from tick_crossing.motion import advance_lane, advance_lanes, make_motion_system
from tick_crossing.session import Session, Token
from tick_crossing.signals import SignalBus, make_signal_system
from tick_crossing.store import BestScoreStore, JsonFileStore, MemoryStore
from tick_crossing.types import LaneKind, Mode, Outcome, TickContext, Trigger

__all__ = [
    "BestScoreStore",
    "Clock",
    "CommandRouter",
    "Continue",
    "DEFAULT_CONFIG",
    "DOWN",
    "Engine",
    "FixedStepDriver",
    "Game",
    "GameConfig",
    "Guards",
    "Item",
    "JsonFileStore",
    "LAYOUT",
    "LEFT",
    "Lane",
    "LaneKind",
    "LaneSpec",
    "MemoryStore",
    "Mode",
    "Move",
    "Outcome",
    "Pause",
    "RIGHT",
    "Restart",
    "Resume",
    "Session",
    "SignalBus",
    "Start",
    "StateMachine",
    "TRANSITIONS",
    "TickContext",
    "TogglePause",
    "Token",
    "Trigger",
    "UP",
    "advance_lane",
    "advance_lanes",
    "build_lanes",
    "covered",
    "make_motion_system",
    "make_signal_system",
    "occupancy",
    "occupied_cells",
    "on_segment",
    "resolve",
    "validate_layout",
]
