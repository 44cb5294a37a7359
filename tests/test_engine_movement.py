"""Tests for MazeSession.apply_move(): legality, encounters, mood reroll and morphing."""

from psymaze.grid import Direction, Mood, ObstacleType, Position
from psymaze.npcs import NPC, NPCType


def _mentor(at):
    return NPC(Position(*at), NPCType.MENTOR, "M happy", "M neutral", "M sad")


class TestInvalidMoves:
    def test_out_of_bounds(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([]))
        out = s.apply_move("w")
        assert out.success is False
        assert out.reason == "invalid"
        assert out.position == Position(0, 0)

    def test_into_wall_leaves_state(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([]))
        out = s.apply_move("s")
        assert out.success is False
        assert s.position == Position(0, 0)
        assert s.counters.steps == 0
        assert s.player.mood == Mood.NEUTRAL
        assert sum(s.counters.moods.values()) == 0

    def test_failed_move_still_sets_direction(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([]))
        s.apply_move("s")
        assert s.last_direction is Direction.DOWN

    def test_unknown_direction_is_invalid(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([]))
        out = s.apply_move("x")
        assert out.success is False
        assert out.reason == "invalid"
        assert s.position == Position(0, 0)
        assert s.last_direction is Direction.RIGHT


class TestValidMoves:
    def test_move_right(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([1]))
        out = s.apply_move("d")
        assert out.success is True
        assert out.reason == "moved"
        assert out.position == Position(0, 1)
        assert s.is_visited(0, 1)
        assert s.counters.steps == 1

    def test_accepts_direction_enum(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([1]))
        assert s.apply_move(Direction.RIGHT).success

    def test_mood_tallied_once_per_move(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([1, 1]))
        s.apply_move("d")
        s.apply_move("d")
        assert s.counters.moods[Mood.NEUTRAL] == 2

    def test_reach_exit(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([1, 1, 1, 1]))
        for d in "ddss":
            assert s.apply_move(d).success
        assert s.is_complete()

    def test_obstacle_effect_reported(self, make_session, scripted_rng):
        s = make_session([".T.", "##.", "##."], rng=scripted_rng([0]), mood=Mood.SAD)
        out = s.apply_move("d")
        assert out.obstacle_effect.obstacle == ObstacleType.TRAP
        assert out.obstacle_effect.outcome == "failed"
        assert s.counters.traps == 1


class TestMoodReroll:
    def test_unchanged_mood_no_morph(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([1]))
        out = s.apply_move("d")
        assert out.mood_changed is False
        assert out.morph is None

    def test_changed_mood_morphs_once(self, make_session, corridor_rows, scripted_rng):
        # reroll SAD, then morph relocation draws land on wall (1,0)
        r = scripted_rng([0, 1, 0])
        s = make_session(corridor_rows, rng=r, morph_amount=0)
        out = s.apply_move("d")
        assert out.mood_changed is True
        assert out.morph is not None
        assert out.morph.mood == Mood.SAD
        assert s.player.mood == Mood.SAD
        assert r.values == []

    def test_compares_pre_move_mood(self, make_session, scripted_rng):
        # bonus lifts NEUTRAL to HAPPY, reroll lands back on NEUTRAL: no net change
        s = make_session([".B.", "##.", "##."], rng=scripted_rng([1]))
        out = s.apply_move("d")
        assert out.obstacle_effect.mood_after == Mood.HAPPY
        assert out.mood_changed is False
        assert s.player.mood == Mood.NEUTRAL

    def test_reroll_supersedes_obstacle(self, make_session, scripted_rng):
        s = make_session([".B.", "##.", "##."], rng=scripted_rng([2, 1, 0]), morph_amount=0)
        out = s.apply_move("d")
        assert out.mood_changed is True
        assert s.player.mood == Mood.HAPPY
        assert s.counters.moods[Mood.HAPPY] == 1


class TestNPCMoves:
    def test_encounter_on_arrival(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([1]), npcs=[_mentor((0, 1))])
        out = s.apply_move("d")
        assert out.npc_encounter is not None
        assert out.npc_encounter.line == "M neutral"

    def test_line_uses_post_obstacle_mood(self, make_session, scripted_rng):
        s = make_session([".B.", "##.", "##."], rng=scripted_rng([2]), npcs=[_mentor((0, 1))], mood=Mood.HAPPY)
        out = s.apply_move("d")
        assert out.npc_encounter.line == "M happy"

    def test_revisit_is_silent(self, make_session, corridor_rows, scripted_rng):
        s = make_session(corridor_rows, rng=scripted_rng([1, 1, 1]), npcs=[_mentor((0, 1))])
        assert s.apply_move("d").npc_encounter is not None
        s.apply_move("a")
        assert s.apply_move("d").npc_encounter is None

    def test_npc_at_only_active(self, make_session, corridor_rows, scripted_rng):
        npc = _mentor((0, 1))
        s = make_session(corridor_rows, rng=scripted_rng([1]), npcs=[npc])
        assert s.npc_at(0, 1) is npc
        s.apply_move("d")
        assert s.npc_at(0, 1) is None
