"""Tests for merging slices into layers."""

from __future__ import annotations

import pytest

from sandwich.domain import Layer, LayerMerger, Placement2D, Slice, merge_slices


def _slices(*cross_sections: tuple[Placement2D, ...], step: float = 1.0) -> list[Slice]:
    return [
        Slice(index=i, z_min=i * step, z_max=(i + 1) * step, cross_section=cs)
        for i, cs in enumerate(cross_sections)
    ]


class TestLayerMerger:
    """Tests for LayerMerger."""

    def test_no_slices_gives_no_layers(self) -> None:
        assert merge_slices([]) == []

    def test_single_slice(self, p1: Placement2D) -> None:
        layers = merge_slices(_slices((p1,)))
        assert layers == [Layer(z_min=0.0, z_max=1.0, cross_section=(p1,), slice_count=1)]

    def test_identical_neighbours_merge(self, p1: Placement2D) -> None:
        layers = merge_slices(_slices((p1,), (p1,), (p1,)))

        assert len(layers) == 1
        assert layers[0].z_min == 0.0
        assert layers[0].z_max == 3.0
        assert layers[0].slice_count == 3

    def test_different_neighbours_stay_separate(self, p1: Placement2D, p2: Placement2D) -> None:
        layers = merge_slices(_slices((p1,), (p2,)))
        assert [layer.cross_section for layer in layers] == [(p1,), (p2,)]

    def test_only_consecutive_runs_merge(self, p1: Placement2D, p2: Placement2D) -> None:
        """Identical cross-sections separated by another one are not merged."""
        layers = merge_slices(_slices((p1,), (p2,), (p1,)))
        assert [layer.cross_section for layer in layers] == [(p1,), (p2,), (p1,)]

    def test_empty_slices_merge_together(self, p1: Placement2D) -> None:
        layers = merge_slices(_slices((p1,), (), (), (p1,)))

        assert [layer.cross_section for layer in layers] == [(p1,), (), (p1,)]
        assert layers[1].slice_count == 2
        assert layers[1].is_empty

    def test_order_of_placements_matters(self, p1: Placement2D, p2: Placement2D) -> None:
        layers = merge_slices(_slices((p1, p2), (p2, p1)))
        assert len(layers) == 2

    def test_multiplicity_matters(self, p1: Placement2D) -> None:
        layers = merge_slices(_slices((p1,), (p1, p1)))
        assert len(layers) == 2

    def test_layers_are_contiguous(self, p1: Placement2D, p2: Placement2D) -> None:
        layers = merge_slices(_slices((p1,), (p1,), (p2,), (), (p1,), step=0.5))

        assert layers[0].z_min == 0.0
        assert layers[-1].z_max == 2.5
        for lower, upper in zip(layers, layers[1:]):
            assert lower.z_max == upper.z_min
            assert lower.cross_section != upper.cross_section

    def test_slice_counts_add_up(self, p1: Placement2D, p2: Placement2D) -> None:
        slices = _slices((p1,), (p1,), (p2,), (), (), (p1,))
        layers = LayerMerger().merge(slices)
        assert sum(layer.slice_count for layer in layers) == len(slices)

    def test_descending_slices_raise(self, p1: Placement2D) -> None:
        slices = list(reversed(_slices((p1,), (p1,))))
        with pytest.raises(ValueError, match="ascending"):
            merge_slices(slices)

    def test_overlapping_slices_raise(self, p1: Placement2D, p2: Placement2D) -> None:
        """A slice starting inside the one before it is out of order."""
        slices = [
            Slice(index=0, z_min=0.0, z_max=1.0, cross_section=(p1,)),
            Slice(index=1, z_min=0.5, z_max=1.5, cross_section=(p2,)),
        ]
        with pytest.raises(ValueError, match="ascending"):
            merge_slices(slices)

    def test_input_is_not_modified(self, p1: Placement2D) -> None:
        slices = _slices((p1,), (p1,))
        before = list(slices)
        merge_slices(slices)
        assert slices == before
