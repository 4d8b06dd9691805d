import json
import tempfile
import unittest
from pathlib import Path

import numpy as np

from rxnmatrix.persistence import sqlite_store
from rxnmatrix.reaction_set import ReactionSet


class TestSqliteStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.connection = sqlite_store.connect(Path(self._tmp.name) / "project.db")
        sqlite_store.ensure_schema(self.connection)
        self.project_id = sqlite_store.create_project(self.connection, name="test")

    def tearDown(self):
        self.connection.close()
        self._tmp.cleanup()

    def test_round_trip_matrix(self):
        rs = ReactionSet(["A + A = B", "B = C"], "chain")
        set_id = sqlite_store.save_reaction_set(self.connection, self.project_id, rs)

        species, comment, matrix = sqlite_store.load_matrix(self.connection, set_id)
        self.assertEqual(species, ["A", "B", "C"])
        self.assertEqual(comment, "chain")
        np.testing.assert_array_equal(matrix, rs.matrix)

    def test_reactions_and_species_rows(self):
        rs = ReactionSet(["A = B", "B = C"])
        set_id = sqlite_store.save_reaction_set(self.connection, self.project_id, rs)
        sqlite_store.save_reaction_set(self.connection, self.project_id, ReactionSet("C = A"))

        names = [row[0] for row in self.connection.execute("SELECT name FROM species ORDER BY id")]
        self.assertEqual(names, ["A", "B", "C"])

        rows = self.connection.execute(
            "SELECT equation, stoich FROM reaction WHERE reaction_set_id = ? ORDER BY position",
            (set_id,),
        ).fetchall()
        self.assertEqual(rows[0][0], "A = B")
        self.assertEqual(json.loads(rows[1][1]), {"B": -1.0, "C": 1.0})

        columns = [row[1] for row in self.connection.execute("PRAGMA table_info(reaction)")]
        self.assertEqual(columns, ["id", "reaction_set_id", "position", "equation", "stoich"])

    def test_missing_reaction_set(self):
        with self.assertRaises(KeyError):
            sqlite_store.load_matrix(self.connection, 999)


if __name__ == '__main__':
    unittest.main()
