import unittest

import pygame

from blockfall_engine import Engine
from blockfall_input import EventQueue, Key, Tick, TICK_EVENT, dispatch, from_pygame


class DispatchTests(unittest.TestCase):
    def setUp(self):
        self.game = Engine(width=10, height=20)

    def test_tick_advances(self):
        self.assertTrue(dispatch(self.game, Tick()))
        self.assertEqual(self.game.piece.x, 5)

    def test_arrow_keys_shift(self):
        self.assertTrue(dispatch(self.game, Key("ArrowRight")))
        self.assertTrue(dispatch(self.game, Key("ArrowRight")))
        self.assertTrue(dispatch(self.game, Key("ArrowLeft")))
        self.assertTrue(dispatch(self.game, Key("ArrowDown")))
        self.assertEqual((self.game.piece.x, self.game.piece.y), (5, 1))

    def test_other_keys_ignored(self):
        for code in ("ArrowUp", "KeyA", "Space", ""):
            self.assertFalse(dispatch(self.game, Key(code)))
        self.assertEqual((self.game.piece.x, self.game.piece.y), (4, 0))

    def test_tick_after_game_over_requests_no_render(self):
        for r in range(4, 8):
            self.game.grid[r] = [1] * 10
        self.assertTrue(dispatch(self.game, Tick()))
        self.assertTrue(self.game.ended)
        self.assertFalse(dispatch(self.game, Tick()))
        self.assertFalse(dispatch(self.game, Key("ArrowRight")))
        self.assertEqual((self.game.piece.x, self.game.piece.y), (4, 0))

    def test_unknown_message(self):
        with self.assertRaises(TypeError):
            dispatch(self.game, "tick")


class QueueTests(unittest.TestCase):
    def test_drain_in_order(self):
        q = EventQueue()
        msgs = [Tick(), Key("ArrowLeft"), Tick(), Key("ArrowDown")]
        for m in msgs:
            q.put(m)
        self.assertEqual(len(q), 4)
        self.assertEqual(list(q.drain()), msgs)
        self.assertEqual(len(q), 0)

    def test_messages_applied_in_order(self):
        game = Engine(width=10, height=20)
        q = EventQueue()
        q.put(Key("ArrowRight"))
        q.put(Tick())
        for m in q.drain():
            dispatch(game, m)
        self.assertEqual(game.grid[3][1], 2)
        self.assertEqual(game.grid[3][2], 2)
        self.assertEqual(game.grid[3][0], 0)


class PygameTranslationTests(unittest.TestCase):
    def test_timer_event_is_tick(self):
        self.assertEqual(from_pygame(pygame.event.Event(TICK_EVENT)), Tick())

    def test_arrow_keydown(self):
        ev = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT)
        self.assertEqual(from_pygame(ev), Key("ArrowLeft"))
        ev = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_DOWN)
        self.assertEqual(from_pygame(ev), Key("ArrowDown"))

    def test_other_events(self):
        self.assertIsNone(from_pygame(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)))
        self.assertIsNone(from_pygame(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT)))


if __name__ == "__main__":
    unittest.main()
