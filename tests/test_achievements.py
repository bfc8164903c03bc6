# tests/test_achievements.py

"""
Achievement Service Tests - rule conditions, unlocking and totals
"""

from datetime import datetime, timedelta, timezone

import pytest

from multievent.models.enumerations import AchievementType, EventType
from multievent.services.achievement_service import ACHIEVEMENT_DEFINITIONS

USER_ID = 1
BASE_DATE = datetime(2026, 5, 1, tzinfo=timezone.utc)


def _perf(total, event_type="decathlon", day=0):
    return {"event_type": event_type, "total_score": total, "date": BASE_DATE + timedelta(days=day)}


def _condition(achievement_type):
    for definition in ACHIEVEMENT_DEFINITIONS:
        if definition.type == achievement_type:
            return definition.condition
    raise KeyError(achievement_type)


def _save(repo, total, event_type=EventType.DECATHLON, day=0):
    results = [{"name": "100m", "result": "", "points": total, "type": "time", "unit": "seconds"}]
    return repo.create(event_type, results, total, date=BASE_DATE + timedelta(days=day))



# DEFINITIONS


class TestDefinitions:

    def test_ten_unique_rules(self):
        types = [d.type for d in ACHIEVEMENT_DEFINITIONS]
        assert len(types) == 10
        assert set(types) == set(AchievementType)

    def test_titles_and_points(self):
        catalogue = {d.type.value: (d.title, d.points) for d in ACHIEVEMENT_DEFINITIONS}
        assert catalogue == {
            "first_performance": ("First Steps", 50),
            "score_milestone_5000": ("Rising Star", 100),
            "score_milestone_6000": ("Skilled Athlete", 150),
            "score_milestone_7000": ("Elite Performer", 200),
            "score_milestone_8000": ("World Class", 300),
            "event_specialist": ("Event Specialist", 100),
            "multi_event_master": ("Multi-Event Master", 200),
            "consistency_champion": ("Consistency Champion", 150),
            "improvement_streak": ("Improvement Streak", 100),
            "perfect_ten": ("Perfect Ten", 150),
        }

    def test_colors_are_gradients(self):
        for definition in ACHIEVEMENT_DEFINITIONS:
            assert definition.color.startswith("from-")
            assert " to-" in definition.color
            assert definition.icon



# RULE CONDITIONS


class TestConditions:

    def test_first_performance(self):
        check = _condition(AchievementType.FIRST_PERFORMANCE)
        assert check([_perf(3000)], None)
        assert not check([], None)
        assert not check([_perf(3000), _perf(3100)], None)

    def test_milestone_uses_new_performance(self):
        check = _condition(AchievementType.SCORE_MILESTONE_5000)
        assert check([_perf(3000)], _perf(5000))
        # the new performance decides even when an older one qualifies
        assert not check([_perf(9000)], _perf(4999))

    def test_milestone_without_new_performance_scans_history(self):
        check = _condition(AchievementType.SCORE_MILESTONE_8000)
        assert check([_perf(3000), _perf(8000)], None)
        assert not check([_perf(7999)], None)

    def test_event_specialist(self):
        check = _condition(AchievementType.EVENT_SPECIALIST)
        assert check([_perf(5000, "heptathlon")] * 10, None)
        assert not check([_perf(5000, "heptathlon")] * 9 + [_perf(5000, "decathlon")], None)

    def test_multi_event_master(self):
        check = _condition(AchievementType.MULTI_EVENT_MASTER)
        history = [_perf(1, "decathlon"), _perf(1, "heptathlon")]
        assert not check(history, None)
        assert check(history + [_perf(1, "pentathlon")], None)

    def test_consistency_champion_uses_last_five(self):
        check = _condition(AchievementType.CONSISTENCY_CHAMPION)
        assert not check([_perf(5000)] * 4, None)
        assert check([_perf(s) for s in (5000, 5050, 5100, 5150, 5199)], None)
        assert not check([_perf(s) for s in (5000, 5050, 5100, 5150, 5200)], None)
        # an old outlier outside the last five does not count
        assert check([_perf(1000)] + [_perf(6000)] * 5, None)

    @pytest.mark.parametrize("scores,expected", [
        ((100, 200, 300), True),
        ((500, 100, 200, 300), True),
        ((100, 300, 200), False),
        ((100, 100, 200), False),
        ((100, 200), False),
    ])
    def test_improvement_streak(self, scores, expected):
        check = _condition(AchievementType.IMPROVEMENT_STREAK)
        assert check([_perf(s) for s in scores], None) is expected

    def test_perfect_ten(self):
        check = _condition(AchievementType.PERFECT_TEN)
        assert check([_perf(1)] * 10, None)
        assert not check([_perf(1)] * 9, None)



# SERVICE


class TestAchievementService:

    def test_first_save_unlocks_first_steps(self, achievement_service, performance_repo):
        row = _save(performance_repo, 3000)
        unlocked = achievement_service.check_and_unlock(USER_ID, new_performance=row)
        assert [a["achievement_type"] for a in unlocked] == ["first_performance"]
        assert unlocked[0]["metadata"] == {"icon": "🏃", "color": "from-green-400 to-emerald-600"}

    def test_high_score_unlocks_milestones(self, achievement_service, performance_repo):
        row = _save(performance_repo, 6841)
        unlocked = achievement_service.check_and_unlock(USER_ID, new_performance=row)
        assert [a["achievement_type"] for a in unlocked] == [
            "first_performance",
            "score_milestone_5000",
            "score_milestone_6000",
        ]

    def test_unlocks_only_once(self, achievement_service, performance_repo):
        row = _save(performance_repo, 5500)
        achievement_service.check_and_unlock(USER_ID, new_performance=row)
        row = _save(performance_repo, 5600, day=1)
        unlocked = achievement_service.check_and_unlock(USER_ID, new_performance=row)
        assert "score_milestone_5000" not in [a["achievement_type"] for a in unlocked]
        assert len(achievement_service.get_user_achievements(USER_ID)) == 2

    def test_improvement_streak_follows_dates(self, achievement_service, performance_repo):
        # saved out of order; by date the totals rise 4000 -> 4100 -> 4200
        _save(performance_repo, 4200, day=2)
        _save(performance_repo, 4000, day=0)
        _save(performance_repo, 4100, day=1)
        unlocked = achievement_service.check_and_unlock(USER_ID)
        assert "improvement_streak" in [a["achievement_type"] for a in unlocked]

    def test_multi_event_master_via_service(self, achievement_service, performance_repo):
        for day, event_type in enumerate(EventType):
            _save(performance_repo, 3000, event_type=event_type, day=day)
        unlocked = achievement_service.check_and_unlock(USER_ID)
        assert "multi_event_master" in [a["achievement_type"] for a in unlocked]

    def test_total_points(self, achievement_service, performance_repo):
        row = _save(performance_repo, 6841)
        achievement_service.check_and_unlock(USER_ID, new_performance=row)
        assert achievement_service.get_total_points(USER_ID) == 50 + 100 + 150
        assert achievement_service.get_total_points(2) == 0

    def test_no_performances_unlocks_nothing(self, achievement_service):
        assert achievement_service.check_and_unlock(USER_ID) == []

    def test_get_definition(self, achievement_service):
        assert achievement_service.get_definition("perfect_ten").title == "Perfect Ten"
        assert achievement_service.get_definition(AchievementType.EVENT_SPECIALIST).points == 100
        assert achievement_service.get_definition("bogus") is None
