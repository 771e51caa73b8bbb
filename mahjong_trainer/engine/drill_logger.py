"""Drill logger - records every problem and answer for later review."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional

from mahjong_trainer.analysis.efficiency import DiscardFeedback
from mahjong_trainer.core.tile import Tile, tiles_to_string

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


class DrillLogger:
    """Records drill problems and graded answers to JSON log files."""

    def __init__(self, config_info: dict, log_dir: Optional[str] = None):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.config_info = config_info
        self.log_dir = log_dir or LOG_DIR

        self.problems: List[dict] = []

    def record(self, hand: List[Tile], feedback: DiscardFeedback):
        """Log one answered problem."""
        chosen = feedback.discard
        self.problems.append({
            "problem_id": uuid.uuid4().hex[:8],
            "hand": tiles_to_string(hand),
            "discard": chosen.kind.name,
            "rating": feedback.rating.value,
            "shanten": chosen.shanten,
            "ukeire": chosen.ukeire_total,
            "best_shanten": feedback.best_shanten,
            "best_ukeire": feedback.best_ukeire,
            "best_discards": [o.kind.name for o in feedback.best_options],
        })

    @property
    def summary(self) -> dict:
        ratings = {}
        for p in self.problems:
            ratings[p["rating"]] = ratings.get(p["rating"], 0) + 1
        return {"answered": len(self.problems), "ratings": ratings}

    def save(self) -> str:
        """Save the session log to a JSON file and return its path."""
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "config": self.config_info,
            "summary": self.summary,
            "problems": self.problems,
        }

        os.makedirs(self.log_dir, exist_ok=True)
        filepath = os.path.join(self.log_dir, f"drill_{self.session_id}.json")

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        return filepath
