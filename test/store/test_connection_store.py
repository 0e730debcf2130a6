from pincore.store.connection_store import ConnectionStore


class TestConnectionStore:

    def test_empty_store(self):
        store = ConnectionStore()

        assert store.get("GND") is None
        assert store.all_entries() == []
        assert len(store) == 0

    def test_set_is_an_unconditional_upsert(self):
        # Arrange
        store = ConnectionStore()

        # Act
        store.set("Vout", "PB6")
        store.set("Vout", "PA0")

        # Assert
        assert store.get("Vout") == "PA0"
        assert len(store) == 1

    def test_store_never_rejects_pin_reuse(self):
        store = ConnectionStore()

        store.set("GND", "PA0")
        store.set("Vdd", "PA0")

        assert store.owners_of("PA0") == ["GND", "Vdd"]

    def test_all_entries_keep_insertion_order_on_reassignment(self):
        store = ConnectionStore()
        store.set("GND", "GND")
        store.set("DQ", "PA4")
        store.set("Vdd", "VCC")

        store.set("GND", "PA1")

        assert store.all_entries() == [("GND", "PA1"), ("DQ", "PA4"), ("Vdd", "VCC")]

    def test_clear(self):
        store = ConnectionStore()
        store.set("GND", "GND")

        store.clear()

        assert "GND" not in store
        assert store.owners_of("GND") == []
