"""
Pydantic schemas for game rule configuration.

Rules are supplied once at game setup and read by the board core and the
turn resolver. Configuration can be provided as YAML or JSON files.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, model_validator


class WinCondition(str, Enum):
    """How a game is won."""
    DESTINATION = "destination"
    ELIMINATION = "elimination"


class Visibility(str, Enum):
    """How much of the opposing territory each player can see."""
    STANDARD = "standard"
    FOG_OF_WAR = "fog_of_war"


class Truncation(str, Enum):
    """When disconnected territory is removed from the board."""
    ROOT = "root"
    NONE = "none"


class SwapPolicy(str, Enum):
    """Which pairs of a player's own tiles may be swapped."""
    CONTIGUOUS = "contiguous"
    UNIVERSAL = "universal"
    NONE = "none"


class TimingKind(str, Enum):
    PER_PLAYER = "per_player"
    PER_TURN = "per_turn"
    PERIODIC = "periodic"
    NONE = "none"


class OvertimeKind(str, Enum):
    FREE_WILDCARD = "free_wildcard"
    REMOVE_TILES = "remove_tiles"
    ELIMINATION = "elimination"


class TileDistribution(str, Enum):
    STANDARD = "standard"


class TileBagBehaviour(str, Enum):
    STANDARD = "standard"
    INFINITE = "infinite"


class SwapPenalty(BaseModel):
    """Time penalties (seconds) applied by the turn resolver once a player swaps too often."""
    swap_threshold: int = Field(default=2, ge=0)
    penalties: List[int] = Field(default_factory=lambda: [5, 10, 30, 60, 120, 240])


class Swapping(BaseModel):
    """Swap policy together with its penalty schedule."""
    policy: SwapPolicy = SwapPolicy.CONTIGUOUS
    penalty: Optional[SwapPenalty] = Field(default_factory=SwapPenalty)

    @model_validator(mode="after")
    def _no_penalty_without_swaps(self) -> "Swapping":
        # Swapping is never allowed under NONE, so there is nothing to penalise
        if self.policy == SwapPolicy.NONE:
            self.penalty = None
        return self


class OvertimeRule(BaseModel):
    kind: OvertimeKind = OvertimeKind.FREE_WILDCARD
    period: Optional[int] = Field(default=60, ge=1)
    phase_time: Optional[int] = Field(default=None, ge=1)


class Timing(BaseModel):
    """Turn clock configuration. Enforced by the turn resolver, never by the board."""
    kind: TimingKind = TimingKind.PER_PLAYER
    time_allowance: Optional[int] = Field(default=600, ge=1, description="Seconds")
    turn_delay: Optional[int] = Field(default=None, ge=0, description="Seconds between periodic turns")
    overtime_rule: Optional[OvertimeRule] = Field(default_factory=OvertimeRule)


class BattleRules(BaseModel):
    """How much longer an attacking word must be to win against a valid defender."""
    length_delta: int = Field(default=2, ge=0)


class GameRules(BaseModel):
    """Complete rule set for a game."""
    win_condition: WinCondition = WinCondition.DESTINATION
    visibility: Visibility = Visibility.FOG_OF_WAR
    truncation: Truncation = Truncation.NONE
    timing: Timing = Field(default_factory=Timing)
    hand_size: int = Field(default=7, ge=1)
    tile_distribution: TileDistribution = TileDistribution.STANDARD
    tile_bag_behaviour: TileBagBehaviour = TileBagBehaviour.STANDARD
    battle_rules: BattleRules = Field(default_factory=BattleRules)
    swapping: Swapping = Field(default_factory=Swapping)

    class Config:
        json_schema_extra = {
            "example": {
                "win_condition": "destination",
                "visibility": "fog_of_war",
                "truncation": "root",
                "timing": {"kind": "per_player", "time_allowance": 600},
                "hand_size": 7,
                "battle_rules": {"length_delta": 2},
                "swapping": {"policy": "contiguous"},
            }
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "GameRules":
        """Create rules from a dictionary, ignoring unknown keys."""
        valid_keys = set(cls.model_fields)
        filtered_dict = {k: v for k, v in (config_dict or {}).items() if k in valid_keys}
        return cls.model_validate(filtered_dict)

    @classmethod
    def from_file(cls, config_path: Path) -> "GameRules":
        """Load rules from a YAML or JSON file."""
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Rules file not found: {config_path}")

        with open(config_path, "r") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                config_dict = yaml.safe_load(f)
            elif config_path.suffix.lower() == ".json":
                config_dict = json.load(f)
            else:
                raise ValueError(f"Unsupported rules file format: {config_path.suffix}")

        return cls.from_dict(config_dict)

    def save_to_file(self, config_path: Path):
        """Save rules to a YAML or JSON file."""
        config_path = Path(config_path)
        config_dict = self.model_dump(mode="json")

        with open(config_path, "w") as f:
            if config_path.suffix.lower() in [".yaml", ".yml"]:
                yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
            elif config_path.suffix.lower() == ".json":
                json.dump(config_dict, f, indent=2, sort_keys=False)
            else:
                raise ValueError(f"Unsupported rules file format: {config_path.suffix}")

    def log_config(self, logger: logging.Logger):
        """Log the effective rule set."""
        logger.info("=" * 60)
        logger.info("Game Rules")
        logger.info("=" * 60)
        logger.info(f"Win Condition: {self.win_condition.value}")
        logger.info(f"Visibility: {self.visibility.value}")
        logger.info(f"Truncation: {self.truncation.value}")
        logger.info(f"Timing: {self.timing.kind.value} (allowance={self.timing.time_allowance})")
        logger.info(f"Hand Size: {self.hand_size}")
        logger.info(f"Battle Length Delta: {self.battle_rules.length_delta}")
        logger.info(f"Swapping: {self.swapping.policy.value}")
        logger.info("=" * 60)
