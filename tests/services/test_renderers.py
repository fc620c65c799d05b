"""Tests for the CSV and framed renderers."""

from __future__ import annotations

import csv

import pytest

from tabla import builder
from tabla.core.constraints import ColumnWidthConstraint
from tabla.services.renderers import Renderer, render_table
from tabla.services.renderers.delimited import CSVRenderer, format_record
from tabla.services.renderers.factory import get_renderer
from tabla.services.renderers.framed import ASCII_GLYPHS, FramedRenderer, FramePiece


def _widget_table():
    table_builder = (
        builder()
        .declare_column("ID", ColumnWidthConstraint.exact_width(2))
        .declare_column("Name", ColumnWidthConstraint.exact_width(6))
    )
    table_builder.add_row().add_cell("1").add_cell("Widget")
    table_builder.add_row().add_cell("2").add_cell("Gadget")
    return table_builder.build()


def _header_only_table():
    return builder().declare_column("ID").declare_column("Name").declare_column("Description").build()


def test_framed_ascii_rendering():
    assert render_table(_widget_table(), Renderer.FRAMED_ASCII) == [
        "+----+--------+",
        "| ID | Name   |",
        "+----+--------+",
        "| 1  | Widget |",
        "+----+--------+",
        "| 2  | Gadget |",
        "+----+--------+",
    ]


def test_framed_unicode_rendering():
    assert render_table(_widget_table(), Renderer.FRAMED_UNICODE) == [
        "┌────┬────────┐",
        "│ ID │ Name   │",
        "├────┼────────┤",
        "│ 1  │ Widget │",
        "├────┼────────┤",
        "│ 2  │ Gadget │",
        "└────┴────────┘",
    ]


def test_framed_without_rows_draws_header_only():
    assert render_table(_header_only_table(), Renderer.FRAMED_UNICODE) == [
        "┌────┬──────┬─────────────┐",
        "│ ID │ Name │ Description │",
        "└────┴──────┴─────────────┘",
    ]


def test_framed_multiline_rows_pad_shorter_cells():
    table_builder = (
        builder()
        .declare_column("Name", ColumnWidthConstraint.exact_width(5))
        .declare_column("Note", ColumnWidthConstraint.exact_width(4))
    )
    table_builder.add_row().add_cell("Screen Cleaner").add_cell("ok")

    lines = render_table(table_builder.build(), Renderer.FRAMED_ASCII)

    assert lines == [
        "+-------+------+",
        "| Name  | Note |",
        "+-------+------+",
        "| Scre- | ok   |",
        "| en    |      |",
        "| Clea- |      |",
        "| ner   |      |",
        "+-------+------+",
    ]


def test_framed_lines_share_one_width(inventory_builder):
    table = inventory_builder(ColumnWidthConstraint.at_least_header()).build()

    for renderer in (Renderer.FRAMED_ASCII, Renderer.FRAMED_UNICODE):
        lines = render_table(table, renderer)
        assert len({len(line) for line in lines}) == 1


def test_framed_rendering_is_repeatable(inventory_builder):
    table = inventory_builder(ColumnWidthConstraint.at_least_header()).build()
    renderer = get_renderer(Renderer.FRAMED_UNICODE)

    first = "\n".join(renderer.render_lines(table)).encode("utf-8")
    second = "\n".join(renderer.render_lines(table)).encode("utf-8")

    assert first == second


def test_zero_columns_render_nothing_framed():
    empty = builder().build()

    assert render_table(empty, Renderer.FRAMED_ASCII) == []
    assert render_table(empty, Renderer.FRAMED_UNICODE) == []


def test_zero_width_column_keeps_frame_aligned():
    table_builder = (
        builder()
        .declare_column("Hidden", ColumnWidthConstraint.any())
        .declare_column("ID", ColumnWidthConstraint.at_least_header())
    )
    table_builder.add_row().add_cell("secret").add_cell("7")

    assert render_table(table_builder.build(), Renderer.FRAMED_ASCII) == [
        "+--+----+",
        "|  | ID |",
        "+--+----+",
        "|  | 7  |",
        "+--+----+",
    ]


def test_csv_rendering_quotes_every_field():
    assert render_table(_widget_table(), Renderer.CSV) == [
        '"ID","Name"',
        '"1","Widget"',
        '"2","Gadget"',
    ]


def test_csv_round_trip(inventory_builder):
    table_builder = inventory_builder(ColumnWidthConstraint.at_least_header())
    table_builder.add_row().add_cell("  x,y ").add_cell('say "hi"').add_cell("two  spaces")
    table = table_builder.build()

    lines = CSVRenderer().render_lines(table)
    records = list(csv.reader(lines))

    assert records[0] == ["ID", "Name", "Description"]
    assert records[1:] == [[cell.content for cell in row.cells] for row in table.rows]
    assert records[-1] == ["x,y", 'say "hi"', "two  spaces"]


def test_csv_uses_raw_content_not_wrapped_lines(inventory_builder):
    table = inventory_builder(ColumnWidthConstraint.at_least_header()).build()

    lines = render_table(table, Renderer.CSV)

    assert lines[1] == '"af6b0d4f-383a-4d3a-807f-8cf53b64dfa8","Battery","A 9v battery."'


def test_csv_zero_columns_render_nothing():
    assert render_table(builder().build(), Renderer.CSV) == []


def test_format_record_escapes_quotes():
    assert format_record(['He said "no"', ""]) == '"He said ""no""",""'


def test_get_renderer_unknown():
    with pytest.raises(ValueError, match="Unknown renderer"):
        get_renderer("fancy")


def test_framed_renderer_requires_all_glyphs():
    glyphs = dict(ASCII_GLYPHS)
    del glyphs[FramePiece.JUNCTION_CROSS]

    with pytest.raises(ValueError, match="junction-cross"):
        FramedRenderer(glyphs)
