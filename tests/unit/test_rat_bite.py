"""Tests for the rat-bite breakaway tab footprint."""

from __future__ import annotations

import logging
import re

import pytest

from keeb_footprints import Position, render_footprint
from keeb_footprints.footprints.rat_bite import RatBiteParams, body, hole_positions

PAD_RE = re.compile(
    r'\(pad "" np_thru_hole circle \(at (\S+) 0 90\) \(size 0\.3 0\.3\) \(drill 0\.3\) '
    r'\(layers "\*\.Cu" "\*\.Mask"\) \)'
)

EXPECTED_X = [
    "-2.375",
    "-1.78125",
    "-1.1875",
    "-0.59375",
    "0",
    "0.59375",
    "1.1875",
    "1.78125",
    "2.375",
]


def _render(**params: object) -> str:
    return render_footprint("rat_bite", {"at": "(at 10 20 0)", "ref": "RB1", **params})


class TestGeometry:
    def test_nine_pads(self) -> None:
        out = _render()
        assert out.count("(pad ") == 9
        assert len(PAD_RE.findall(out)) == 9

    def test_pad_positions(self) -> None:
        assert PAD_RE.findall(_render()) == EXPECTED_X

    def test_hole_positions_symmetric(self) -> None:
        xs = hole_positions()
        assert len(xs) == 9
        assert xs[0] == -2.375
        assert xs[-1] == 2.375
        assert xs[4] == 0
        for left, right in zip(xs, reversed(xs)):
            assert left == -right

    def test_guide_lines(self) -> None:
        out = _render()
        assert '(fp_line (start -3 -0.2) (end 3 -0.2) (width 0.12) (layer "Dwgs.User") )' in out
        assert '(fp_line (start -3 0.2) (end 3 0.2) (width 0.12) (layer "Dwgs.User") )' in out
        assert out.count("(fp_line ") == 2

    def test_header_and_attr(self) -> None:
        out = _render()
        assert '(module "zzkeeb:Hole_Breakaway-Tabs" (layer "F.Cu")' in out
        assert "(attr virtual)" in out

    def test_parens_balanced(self) -> None:
        out = _render()
        assert out.count("(") == out.count(")")


class TestPlacementAndReference:
    def test_at_token_passthrough(self) -> None:
        lines = _render().splitlines()
        assert lines[2].strip() == "(at 10 20 0)"

    def test_position_at(self) -> None:
        out = _render(at=Position(1.5, -2.0, 45.0))
        assert "\n      (at 1.5 -2 45)\n" in out

    def test_reference_visible(self) -> None:
        out = _render()
        assert (
            '(fp_text reference "RB1" (at 0 0) (layer F.SilkS)  '
            "(effects (font (size 1.27 1.27) (thickness 0.15))))"
        ) in out

    def test_reference_hidden(self) -> None:
        out = _render(ref_hide="hide")
        assert '(fp_text reference "RB1" (at 0 0) (layer F.SilkS) hide (effects' in out

    def test_reference_hidden_by_flag(self) -> None:
        out = _render(ref_hide=True)
        assert '(layer F.SilkS) hide (effects' in out
        assert "True" not in out

    def test_reference_shown_by_flag(self) -> None:
        out = _render(ref_hide=False)
        assert '(fp_text reference "RB1" (at 0 0) (layer F.SilkS)  (effects' in out
        assert "False" not in out

    def test_hide_flag_matches_hide_token(self) -> None:
        assert _render(ref_hide=True) == _render(ref_hide="hide")
        assert _render(ref_hide=False) == _render()

    def test_hide_does_not_move_pads(self) -> None:
        shown = PAD_RE.findall(_render())
        hidden = PAD_RE.findall(_render(ref_hide="hide"))
        assert shown == hidden == EXPECTED_X

    def test_missing_tokens_render_empty(self) -> None:
        out = render_footprint("rat_bite")
        assert '(fp_text reference "" (at 0 0)' in out
        assert out.count("(pad ") == 9

    def test_missing_tokens_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="keeb_footprints.footprints.rat_bite"):
            render_footprint("rat_bite")
        messages = [r.getMessage() for r in caplog.records]
        assert any("position" in m for m in messages)
        assert any("reference" in m for m in messages)
        assert all(getattr(r, "footprint", None) == "rat_bite" for r in caplog.records)


class TestOutput:
    def test_idempotent(self) -> None:
        assert _render(ref_hide="hide") == _render(ref_hide="hide")

    def test_body_matches_registry(self) -> None:
        params = RatBiteParams(at="(at 0 0 0)", ref="RB1")
        assert body(params) == render_footprint("rat_bite", {"at": "(at 0 0 0)", "ref": "RB1"})

    def test_exact_text(self) -> None:
        pads = "".join(
            f'      (pad "" np_thru_hole circle (at {x} 0 90) (size 0.3 0.3) (drill 0.3) '
            f'(layers "*.Cu" "*.Mask") )\n'
            for x in EXPECTED_X
        )
        expected = (
            "\n"
            '  (module "zzkeeb:Hole_Breakaway-Tabs" (layer "F.Cu")\n'
            "      (at 0 0 0)\n"
            '      (fp_text reference "RB1" (at 0 0) (layer F.SilkS) hide '
            "(effects (font (size 1.27 1.27) (thickness 0.15))))\n"
            "\n"
            "      (attr virtual)\n"
            "\n"
            '      (fp_line (start -3 -0.2) (end 3 -0.2) (width 0.12) (layer "Dwgs.User") )\n'
            '      (fp_line (start -3 0.2) (end 3 0.2) (width 0.12) (layer "Dwgs.User") )\n'
            + pads
            + "  )\n"
        )
        out = render_footprint("rat_bite", {"at": "(at 0 0 0)", "ref": "RB1", "ref_hide": "hide"})
        assert out == expected
