from enum import Enum

class EventType(str, Enum):
    DECATHLON = "decathlon"    # Men's, 10 events over 2 days
    HEPTATHLON = "heptathlon"  # Women's, 7 events over 2 days
    PENTATHLON = "pentathlon"  # Women's indoor, 5 events in 1 day

class EventKind(str, Enum):
    TIME = "time"                # Track: lower is better
    MEASUREMENT = "measurement"  # Field: higher is better

class FormulaUnit(str, Enum):
    SECONDS = "seconds"
    METERS = "meters"
    CM = "cm"          # Formula calibrated in centimeters, results entered in meters

class UnitSystem(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"

class AchievementType(str, Enum):
    FIRST_PERFORMANCE = "first_performance"
    SCORE_MILESTONE_5000 = "score_milestone_5000"
    SCORE_MILESTONE_6000 = "score_milestone_6000"
    SCORE_MILESTONE_7000 = "score_milestone_7000"
    SCORE_MILESTONE_8000 = "score_milestone_8000"
    EVENT_SPECIALIST = "event_specialist"
    MULTI_EVENT_MASTER = "multi_event_master"
    CONSISTENCY_CHAMPION = "consistency_champion"
    IMPROVEMENT_STREAK = "improvement_streak"
    PERFECT_TEN = "perfect_ten"
