import unittest

from txgraph.core.dto import AddressRecord, TransactionRecord
from txgraph.core.errors import MalformedResponse
from txgraph.io.schemas import (
    graph_to_dict,
    parse_address_record,
    parse_transaction_record,
    vertices_to_dict,
)
from txgraph.services.graph_builder import build_graph


class ParseAddressTests(unittest.TestCase):
    def test_blockbook_document(self) -> None:
        rec = parse_address_record({
            "address": "bc1qa",
            "balance": "5000",
            "txs": 3,
            "txids": ["t1", "t2", "t3"],
        })

        self.assertEqual(rec.address, "bc1qa")
        self.assertEqual(rec.balance, 5000)
        self.assertEqual(rec.tx_count, 3)
        self.assertEqual(rec.txids, ("t1", "t2", "t3"))
        self.assertEqual(rec.transactions, ())

    def test_missing_txids_means_no_history(self) -> None:
        rec = parse_address_record({"address": "bc1qa", "balance": "0", "txs": 0})
        self.assertEqual(rec.txids, ())

    def test_rejects_bad_shapes(self) -> None:
        bad = [
            [],
            {"balance": "1"},
            {"address": "a", "balance": "lots"},
            {"address": "a", "txids": "t1"},
            {"address": "a", "txids": [1, 2]},
        ]
        for doc in bad:
            with self.subTest(doc=doc):
                with self.assertRaises(MalformedResponse):
                    parse_address_record(doc)


class ParseTransactionTests(unittest.TestCase):
    def test_outputs_with_and_without_addresses(self) -> None:
        tx = parse_transaction_record({
            "txid": "t1",
            "value": "1000",
            "vout": [
                {"value": "900", "addresses": ["a", "b"]},
                {"value": "0"},
            ],
        })

        self.assertEqual(tx.value, 1000)
        self.assertEqual(tx.vout[0].addresses, ("a", "b"))
        self.assertEqual(tx.vout[1].addresses, ())
        self.assertIsNone(tx.destination)

    def test_txid_falls_back_to_requested_id(self) -> None:
        tx = parse_transaction_record({"value": 1, "vout": []}, txid="t7")
        self.assertEqual(tx.txid, "t7")

    def test_rejects_bad_shapes(self) -> None:
        bad = [
            "nope",
            {"txid": "t1", "vout": []},
            {"txid": "t1", "value": "1"},
            {"txid": "t1", "value": "1", "vout": ["x"]},
            {"txid": "t1", "value": "1", "vout": [{"addresses": ["a"]}]},
            {"txid": "t1", "value": True, "vout": []},
        ]
        for doc in bad:
            with self.subTest(doc=doc):
                with self.assertRaises(MalformedResponse):
                    parse_transaction_record(doc)


class ExportTests(unittest.TestCase):
    def _vertices(self):
        tx = TransactionRecord(
            txid="t1", value=1, vout=(), raw={"txid": "t1", "value": "1"}, destination="B"
        )
        return {
            "A": AddressRecord("A", 0, 1, ("t1",), {"address": "A", "txs": 1}, (tx,)),
            "B": AddressRecord("B", 0, 0, (), {"address": "B", "txs": 0}),
        }

    def test_vertices_keyed_by_address_with_annotated_transactions(self) -> None:
        doc = vertices_to_dict(self._vertices())

        self.assertEqual(list(doc), ["A", "B"])
        self.assertEqual(doc["A"]["txs"], 1)
        self.assertEqual(doc["A"]["transactions"], [{"txid": "t1", "value": "1", "destination": "B"}])
        self.assertEqual(doc["B"]["transactions"], [])

    def test_graph_links_reference_node_ids(self) -> None:
        doc = graph_to_dict(build_graph(self._vertices(), origin="A"))

        self.assertEqual([n["id"] for n in doc["nodes"]], ["A", "B"])
        link = doc["links"][0]
        self.assertEqual((link["source"], link["target"]), ("A", "B"))
        self.assertFalse(link["bidirectional"])
        self.assertEqual(link["info"][0]["destination"], "B")


if __name__ == "__main__":
    unittest.main()
