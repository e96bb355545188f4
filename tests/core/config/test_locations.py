from configkeeper.core.config.coercion import EntryType
from configkeeper.core.config.locations import build_location_index, entries_at
from configkeeper.core.config.registry import EntryDescriptor
from configkeeper.core.utils.translation import DictTranslator


def test_index_builds_nested_tree_from_visible_entries(registry):
    root = build_location_index(registry.descriptors())

    assert root.label == "Settings"
    assert [child.label for child in root.children] == ["audio", "profile", "display"]
    display = root.find("display")
    assert [child.label for child in display.children] == ["advanced"]
    assert display.entries == []  # debug_overlay is hidden
    assert [d.name for d in root.find("audio").entries] == ["volume", "muted"]
    assert root.find("display.advanced").path == "display.advanced"


def test_siblings_match_case_insensitively():
    descriptors = [
        EntryDescriptor("a", EntryType.TEXT, "", location="Audio"),
        EntryDescriptor("b", EntryType.TEXT, "", location="audio.mixer"),
    ]
    root = build_location_index(descriptors)
    assert len(root.children) == 1
    assert root.children[0].label == "Audio"
    assert root.find("AUDIO.Mixer") is not None


def test_labels_are_translated():
    translator = DictTranslator(
        {
            "config.location.config": "Einstellungen",
            "config.location.audio": "Ton",
        }
    )
    descriptors = [
        EntryDescriptor("volume", EntryType.COUNT, "50", location="audio"),
        EntryDescriptor("theme", EntryType.CHOICE, "dark", location="display"),
    ]
    root = build_location_index(descriptors, translator)
    assert root.label == "Einstellungen"
    assert [child.label for child in root.children] == ["Ton", "display"]
    assert [d.name for d in entries_at(descriptors, "ton", translator)] == ["volume"]


def test_entries_at_skips_hidden_entries(registry):
    assert entries_at(registry.descriptors(), "display") == []
    assert [d.name for d in entries_at(registry.descriptors(), "Display.Advanced")] == ["theme"]


def test_walk_visits_every_node(registry):
    root = build_location_index(registry.descriptors())
    assert [node.key for node in root.walk()] == ["config", "audio", "profile", "display", "advanced"]


def test_entry_without_location_sits_at_root():
    root = build_location_index([EntryDescriptor("x", EntryType.TEXT, "")])
    assert [d.name for d in root.entries] == ["x"]
    assert root.path == ""
