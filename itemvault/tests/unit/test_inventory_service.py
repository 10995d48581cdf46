"""Unit tests for InventoryService."""

from itemvault.services.inventory_service import InventoryService


class TestInventoryService:
    """Test the two-session save/load flow."""

    def test_save_then_load_in_new_session(self, tmp_path):
        path = tmp_path / "inventory.json"

        first = InventoryService(path)
        first.seed_sample_data()
        assert first.save_data() is True

        second = InventoryService(path)
        assert second.load_data() is True
        assert second.log.list() == first.log.list()
        assert len(second.format_items()) == 5
        assert second.format_items()[0].startswith("ID: 1, Name: Laptop, Quantity: 7, Date Added: ")

    def test_load_without_file(self, tmp_path):
        service = InventoryService(tmp_path / "inventory.json")

        assert service.load_data() is False
        assert service.format_items() == []

    def test_default_path_from_config(self, monkeypatch, tmp_path):
        path = tmp_path / "configured.json"
        monkeypatch.setenv("ITEMVAULT_INVENTORY_FILE", str(path))

        service = InventoryService()

        assert service.log.file_path == path
