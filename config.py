from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", os.getenv("EMOTION_LOG_LEVEL", "INFO")).upper()

# ── History & trend ──────────────────────────────────────────────
EMOTION_HISTORY_CAPACITY = int(os.getenv("EMOTION_HISTORY_CAPACITY", "50"))
EMOTION_CONTEXT_WINDOW = int(os.getenv("EMOTION_CONTEXT_WINDOW", "5"))
EMOTION_TREND_WINDOW_HOURS = float(os.getenv("EMOTION_TREND_WINDOW_HOURS", "24"))

# ── Fusion: "lexical,pattern,contextual", must sum to 1.0 ────────
EMOTION_FUSION_WEIGHTS = os.getenv("EMOTION_FUSION_WEIGHTS", "0.5,0.3,0.2")

# ── Recorder: log every recognised state (1) or record nothing (0)
EMOTION_LOG_RECORDS = bool(int(os.getenv("EMOTION_LOG_RECORDS", "0")))
