"""Tests for the console maze view."""

from psymaze.grid import Mood, Player, Position
from psymaze.npcs import NPC, NPCType
from psymaze.render import cell_glyph, render_maze, render_status


def _npc(x, y, active=True):
    return NPC(Position(x, y), NPCType.SHADOW, "h", "n", "s", active=active)


class TestCellGlyph:
    def test_basic_layout(self, make_session, corridor_rows):
        s = make_session(corridor_rows)
        assert render_maze(s) == "P . .\n# # .\n# # E"

    def test_visited_path(self, make_session, corridor_rows):
        s = make_session(corridor_rows, at=(0, 2))
        s.grid.mark_visited(0, 1)
        assert render_maze(s).splitlines()[0] == ". * P"

    def test_obstacles(self, make_session):
        s = make_session([".TQ", "BK.", "..."])
        assert render_maze(s).splitlines()[:2] == ["P T Q", "B K ."]

    def test_npc_over_obstacle(self, make_session):
        s = make_session([".T.", "...", "..."], npcs=[_npc(0, 1)])
        assert cell_glyph(s, 0, 1) == "N"

    def test_inactive_npc_hidden(self, make_session, corridor_rows):
        s = make_session(corridor_rows, npcs=[_npc(0, 1, active=False)])
        assert cell_glyph(s, 0, 1) == "."

    def test_player_over_exit(self, make_session, corridor_rows):
        s = make_session(corridor_rows, at=(2, 2))
        assert cell_glyph(s, 2, 2) == "P"

    def test_exit_over_npc(self, make_session, corridor_rows):
        s = make_session(corridor_rows, npcs=[_npc(2, 2)])
        assert cell_glyph(s, 2, 2) == "E"


class TestStatus:
    def test_status_lines(self):
        p = Player(position=Position(3, 4), mood=Mood.HAPPY)
        assert render_status(p) == "Player Location: (3, 4)\nCurrent Mood: :)"

    def test_sad_face(self):
        assert render_status(Player(mood=Mood.SAD)).endswith(":(")
