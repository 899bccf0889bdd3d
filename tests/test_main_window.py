"""Smoke test for the demo window wiring."""

from barinventory.app.main_window import MainWindow
from barinventory.model.inventory import Area


def labels(panel):
    return [w.record.label for w in panel.item_widgets()]


def test_main_window_populates_lists(qapp):
    window = MainWindow()
    assert labels(window.panels["locations"]) == ["Harbour Bar"]
    assert labels(window.panels["counters"]) == ["Cocktail Station", "Main Bar"]
    assert labels(window.panels["areas"]) == ["Speed Rail", "Top Shelf", "Fridge"]

    window.stores["areas"].add(Area(id="area-9", name="Back Bar", display_order=3))
    assert labels(window.panels["areas"]) == ["Speed Rail", "Top Shelf", "Back Bar", "Fridge"]
    window.deleteLater()
