"""
Tests for the markdown property loader.
"""
import os

from gobh_site.properties import (
    LoadStatus, Property, PropertyLoader, compare_by_date, get_all_properties,
    get_property_by_slug, make_excerpt, split_front_matter
)


def test_missing_directory_is_created_and_empty(tmp_path):
    target = tmp_path / "content" / "properties"
    loader = PropertyLoader(str(target))

    assert loader.get_all_properties() == []
    assert target.is_dir()
    assert loader.get_all_properties() == []


def test_load_by_slug_uses_file_name(content_dir, write_property):
    write_property("maple-duplex", "Two units on Maple.", title="Maple Duplex", slug="something-else")

    prop = get_property_by_slug("maple-duplex")

    assert prop is not None
    assert prop.slug == "maple-duplex"
    assert prop.title == "Maple Duplex"
    assert "slug" not in prop.extra


def test_missing_slug_returns_none(content_dir):
    assert get_property_by_slug("does-not-exist") is None


def test_load_reports_failure_cause(content_dir):
    loader = PropertyLoader(str(content_dir))
    (content_dir / "broken.md").write_text("---\ntitle: [unclosed\n---\nBody", encoding="utf-8")

    assert loader.load("nope").status is LoadStatus.NOT_FOUND
    assert loader.load("../escape").status is LoadStatus.NOT_FOUND
    assert loader.load("broken").status is LoadStatus.PARSE_ERROR
    assert loader.get_property_by_slug("broken") is None


def test_content_html_is_rendered(content_dir, write_property):
    write_property("oak", "# Oak Street\n\nA *solid* building.", title="Oak")

    prop = get_property_by_slug("oak")

    assert "<h1>Oak Street</h1>" in prop.content_html
    assert "<em>solid</em>" in prop.content_html


def test_excerpt_strips_markdown_and_truncates(content_dir, write_property):
    body = "# Hello *world* `code` " * 20
    body = body.rstrip()
    write_property("long", body, title="Long")

    prop = get_property_by_slug("long")

    expected = body[:150].replace("#", "").replace("*", "").replace("`", "") + "..."
    assert prop.excerpt == expected
    assert prop.excerpt.endswith("...")
    for ch in "#*`":
        assert ch not in prop.excerpt


def test_make_excerpt_short_body():
    assert make_excerpt("## Hi") == " Hi..."


def test_metadata_passes_through(content_dir, write_property):
    write_property(
        "elm", "Body", title="Elm", location="Austin, TX", propertyType="Multi Family",
        units=4, squareFootage=3200, yearAcquired='"2021"', neighborhood="Downtown",
    )

    prop = get_property_by_slug("elm")

    assert prop.location == "Austin, TX"
    assert prop.property_type == "Multi Family"
    assert prop.units == 4
    assert prop.square_footage == 3200
    assert prop.year_acquired == "2021"
    assert prop.extra == {"neighborhood": "Downtown"}


def test_computed_keys_in_front_matter_are_ignored(content_dir, write_property):
    write_property("birch", "Real body", title="Birch", excerpt="fake", contentHtml="<p>fake</p>")

    prop = get_property_by_slug("birch")

    assert prop.excerpt == "Real body..."
    assert "<p>Real body</p>" in prop.content_html
    assert prop.extra == {}


def test_indented_code_body_is_kept(content_dir):
    (content_dir / "code.md").write_text("---\ntitle: C\n---\n    x = 1\n    y = 2\n", encoding="utf-8")

    prop = get_property_by_slug("code")

    assert "<pre><code>x = 1\ny = 2\n</code></pre>" in prop.content_html
    assert prop.excerpt == "    x = 1\n    y = 2\n..."


def test_leading_blank_line_stays_in_excerpt(content_dir):
    (content_dir / "blank.md").write_text("---\ntitle: B\n---\n\nHello", encoding="utf-8")

    prop = get_property_by_slug("blank")

    assert prop.excerpt == "\nHello..."
    assert "<p>Hello</p>" in prop.content_html


def test_split_front_matter():
    assert split_front_matter("---\ntitle: T\n---\n  body\n") == ({"title": "T"}, "  body\n")
    assert split_front_matter("no front matter") == ({}, "no front matter")
    assert split_front_matter("---\n---\nbody") == ({}, "body")


def test_empty_file_name_is_a_listing(content_dir):
    (content_dir / ".md").write_text("---\ntitle: Nameless\n---\nBody", encoding="utf-8")

    props = get_all_properties()

    assert [p.slug for p in props] == [""]
    assert props[0].title == "Nameless"


def test_gallery_list(content_dir):
    (content_dir / "pine.md").write_text(
        "---\ntitle: Pine\ngallery:\n  - /img/a.jpg\n  - /img/b.jpg\n---\nBody", encoding="utf-8"
    )
    assert get_property_by_slug("pine").gallery == ["/img/a.jpg", "/img/b.jpg"]


def test_only_markdown_files_are_loaded(content_dir, write_property):
    write_property("one", "Body", title="One")
    (content_dir / "notes.txt").write_text("ignore me", encoding="utf-8")

    slugs = [p.slug for p in get_all_properties()]

    assert slugs == ["one"]


def test_sorted_by_date_descending(content_dir, write_property):
    write_property("old", "Body", title="Old", date='"2021-03-01"')
    write_property("new", "Body", title="New", date='"2024-06-15"')
    write_property("mid", "Body", title="Mid", date='"2023-01-10"')

    slugs = [p.slug for p in get_all_properties()]

    assert slugs == ["new", "mid", "old"]


def test_yaml_dates_sort_like_strings(content_dir, write_property):
    write_property("a", "Body", title="A", date="2020-01-01")
    write_property("b", "Body", title="B", date="2022-01-01")

    assert [p.slug for p in get_all_properties()] == ["b", "a"]


def test_undated_order_is_stable(content_dir, write_property):
    write_property("alpha", "Body", title="Alpha")
    write_property("beta", "Body", title="Beta", date='"2024-01-01"')
    write_property("gamma", "Body", title="Gamma")
    write_property("delta", "Body", title="Delta", date='"2022-01-01"')

    first = [p.slug for p in get_all_properties()]
    second = [p.slug for p in get_all_properties()]

    assert first == second
    assert sorted(first) == ["alpha", "beta", "delta", "gamma"]


def test_compare_by_date_missing_is_equal():
    dated = Property(slug="a", content_html="", excerpt="", date="2024-01-01")
    undated = Property(slug="b", content_html="", excerpt="")

    assert compare_by_date(dated, undated) == 0
    assert compare_by_date(undated, dated) == 0


def test_content_is_reloaded_on_every_call(content_dir, write_property):
    write_property("live", "First version", title="Live")
    assert "First version" in get_property_by_slug("live").content_html

    write_property("live", "Second version", title="Live")
    assert "Second version" in get_property_by_slug("live").content_html

    os.remove(content_dir / "live.md")
    assert get_all_properties() == []
