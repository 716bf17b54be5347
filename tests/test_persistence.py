import os
import tempfile
import unittest
from fair_dice.core.commitment import CommitmentScheme
from fair_dice.core.engine import FairDiceEngine
from fair_dice.persistence import csv_io, serializer
from fair_dice.persistence.events import GameEvent
from fair_dice.persistence.recorder import InMemoryRecorder


class TestPersistence(unittest.TestCase):
    """
    Tests that engine events can be recorded, and that a protocol transcript survives a
    JSON round trip and still verifies against its commitment.
    """

    def _finished_engine(self):
        engine = FairDiceEngine([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        protocol = engine.start_first_move_protocol()
        protocol.get_commitment()
        engine.decide_first_mover(protocol, 0)
        engine.play_round(0, 1)
        return engine, protocol

    def test_recorder_wraps_engine_events(self):
        engine, protocol = self._finished_engine()
        rec = InMemoryRecorder()
        rec.record_all("g1", engine.pop_events())
        rec.record_all("g1", protocol.pop_events())
        self.assertEqual(len(rec.events()), 6)
        decided = rec.events("FirstMoverDecided")
        self.assertEqual(len(decided), 1)
        self.assertEqual(decided[0].game_id, "g1")
        self.assertNotIn("type", decided[0].payload)
        rec.flush()

    def test_game_event_from_engine(self):
        ev = GameEvent.from_engine("g2", {"type": "RoundEnded", "winner": "user"}, actor="user")
        self.assertEqual(ev.event_type, "RoundEnded")
        self.assertEqual(ev.payload, {"winner": "user"})
        self.assertEqual(ev.actor, "user")

    def test_transcript_json_round_trip_verifies(self):
        _, protocol = self._finished_engine()
        t = protocol.transcript()
        loaded = serializer.load_transcript(serializer.dumps(t))
        self.assertEqual(loaded, t)
        self.assertTrue(CommitmentScheme().verify(loaded.key, loaded.committed_value, loaded.commitment))

    def test_csv_rows_written_with_header(self):
        _, protocol = self._finished_engine()
        row = {"run_id": "r1", **protocol.transcript().__dict__, "verified": True}
        with tempfile.TemporaryDirectory() as d:
            path = os.path.join(d, "transcripts.csv")
            csv_io.append_row_to_csv(row, path, csv_io.get_transcript_header())
            csv_io.append_rows_to_csv([row, row], path, csv_io.get_transcript_header())
            with open(path, encoding="utf-8") as f:
                lines = f.read().splitlines()
        self.assertEqual(lines[0], ",".join(csv_io.TRANSCRIPT_HEADER))
        self.assertEqual(len(lines), 4)


if __name__ == '__main__':
    unittest.main()
