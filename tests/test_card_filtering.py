"""Tests for per-card art and legality checks and projection."""

from typing import Any

import pytest

from cardart.filtering.cards import (
    count_faces_with_art,
    has_usable_art,
    is_legal_in,
    legal_formats,
    project_card,
)
from cardart.models.formats import GameFormat


class TestHasUsableArt:
    def test_direct_art_crop(self, bolt: dict[str, Any]) -> None:
        assert has_usable_art(bolt)

    def test_first_face_art_crop(self, delver: dict[str, Any]) -> None:
        assert has_usable_art(delver)

    def test_no_images(self, artless: dict[str, Any]) -> None:
        assert not has_usable_art(artless)

    def test_only_second_face_has_art(self, back_art_only: dict[str, Any]) -> None:
        """Only the first face counts."""
        assert not has_usable_art(back_art_only)

    def test_image_uris_without_art_crop(self, bolt: dict[str, Any]) -> None:
        del bolt["image_uris"]["art_crop"]

        assert not has_usable_art(bolt)

    def test_empty_art_crop(self, bolt: dict[str, Any]) -> None:
        bolt["image_uris"]["art_crop"] = ""

        assert not has_usable_art(bolt)

    def test_empty_face_list(self, artless: dict[str, Any]) -> None:
        artless["card_faces"] = []

        assert not has_usable_art(artless)

    def test_direct_art_wins_over_faces(self, bolt: dict[str, Any]) -> None:
        """Adventure-style cards carry faces without images but top-level art."""
        bolt["card_faces"] = [{"name": "A"}, {"name": "B"}]

        assert has_usable_art(bolt)


class TestIsLegalIn:
    @pytest.mark.parametrize(
        "status", ["restricted", "banned", "not_legal", "banned_and_restricted"]
    )
    def test_only_legal_counts(self, bolt: dict[str, Any], status: str) -> None:
        bolt["legalities"]["modern"] = status

        assert not is_legal_in(bolt, GameFormat.MODERN)

    def test_legal(self, bolt: dict[str, Any]) -> None:
        assert is_legal_in(bolt, GameFormat.MODERN)
        assert is_legal_in(bolt, GameFormat.LEGACY)

    def test_missing_key(self, bolt: dict[str, Any]) -> None:
        del bolt["legalities"]["modern"]

        assert not is_legal_in(bolt, GameFormat.MODERN)

    def test_missing_legalities(self, bolt: dict[str, Any]) -> None:
        del bolt["legalities"]

        assert not is_legal_in(bolt, GameFormat.MODERN)

    def test_format_maps_to_lowercase_key(self) -> None:
        assert GameFormat.PIONEER.legality_key == "pioneer"
        assert [fmt.value for fmt in GameFormat] == [
            "Standard",
            "Pauper",
            "Pioneer",
            "Modern",
            "Legacy",
            "Vintage",
        ]


class TestLegalFormats:
    def test_in_format_order(self, delver: dict[str, Any]) -> None:
        assert legal_formats(delver) == [GameFormat.PAUPER, GameFormat.MODERN, GameFormat.LEGACY]

    def test_none(self, restricted_only: dict[str, Any]) -> None:
        assert legal_formats(restricted_only) == []


class TestProjectCard:
    def test_single_faced(self, bolt: dict[str, Any]) -> None:
        processed = project_card(bolt, [GameFormat.MODERN, GameFormat.LEGACY])

        assert processed == {
            "id": bolt["id"],
            "name": "Lightning Bolt",
            "scryfall_uri": bolt["scryfall_uri"],
            "layout": "normal",
            "image_uris": {
                "art_crop": bolt["image_uris"]["art_crop"],
                "border_crop": bolt["image_uris"]["border_crop"],
            },
            "formats": ["Modern", "Legacy"],
        }

    def test_drops_legalities_and_other_images(self, bolt: dict[str, Any]) -> None:
        processed = project_card(bolt, [GameFormat.MODERN])

        assert "legalities" not in processed
        assert "object" not in processed
        assert set(processed["image_uris"]) == {"art_crop", "border_crop"}

    def test_faces(self, back_art_only: dict[str, Any]) -> None:
        processed = project_card(back_art_only, [GameFormat.PIONEER])

        assert "image_uris" not in processed
        assert processed["card_faces"] == [
            {"name": "Front", "image_uris": None},
            {
                "name": "Back",
                "image_uris": {
                    "art_crop": back_art_only["card_faces"][1]["image_uris"]["art_crop"],
                    "border_crop": back_art_only["card_faces"][1]["image_uris"]["border_crop"],
                },
            },
        ]

    def test_does_not_mutate_source(self, delver: dict[str, Any]) -> None:
        before = repr(delver)

        project_card(delver, [GameFormat.PAUPER])

        assert repr(delver) == before


class TestCountFacesWithArt:
    def test_counts_all_faces(self, delver: dict[str, Any], back_art_only: dict[str, Any]) -> None:
        assert count_faces_with_art(delver) == 2
        assert count_faces_with_art(back_art_only) == 1

    def test_no_faces(self, bolt: dict[str, Any]) -> None:
        assert count_faces_with_art(bolt) == 0
