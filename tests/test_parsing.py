import pytest

from wallpaperswide.parsing import (
    build_download_target,
    extract_download_link,
    extract_listing_items,
)

from sample_pages import detail_html, listing_html


def test_listing_items_in_document_order():
    items = extract_listing_items(listing_html("/a-wallpapers.html", "/b-wallpapers.html"))
    assert [item.detail_link for item in items] == ["/a-wallpapers.html", "/b-wallpapers.html"]
    assert [item.position for item in items] == [1, 2]


def test_listing_without_cards_is_empty():
    assert extract_listing_items("<html><body><p>nothing here</p></body></html>") == []


def test_card_without_anchor_has_no_link():
    items = extract_listing_items("<div class='wall'><img src='x.jpg'></div>")
    assert len(items) == 1
    assert items[0].detail_link is None


def test_download_link_requires_self_target_and_suffix():
    href = "/download/city-skyline-wallpaper-1920x1080.jpg"
    assert extract_download_link(detail_html(href)) == href


def test_download_link_absent():
    assert extract_download_link(detail_html()) is None


def test_download_target_uses_last_segment():
    target = build_download_target("/download/city-skyline-1920x1080.jpg")
    assert target.file_name == "city-skyline-1920x1080.jpg"
    assert target.url == "https://wallpaperswide.com/download/city-skyline-1920x1080.jpg"


def test_download_target_keeps_absolute_url():
    target = build_download_target("https://cdn.example.com/a/b-1920x1080.jpg")
    assert target.url == "https://cdn.example.com/a/b-1920x1080.jpg"
    assert target.file_name == "b-1920x1080.jpg"


def test_download_target_without_file_name():
    with pytest.raises(ValueError):
        build_download_target("/download/")
