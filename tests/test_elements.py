import dataclasses
import re

import pytest
from bs4 import BeautifulSoup

from htmlbuild.elements import ContainerElement, ImageElement, RawHtml, TextElement, render_node
from htmlbuild.escaping import Escaper

MARKUP_CHARS = ["&", "<", ">", '"', "'"]


def test_text_wraps_content_in_span():
    assert TextElement("Hello World!").render() == "<span>Hello World!</span>"


def test_text_escapes_script_injection():
    rendered = TextElement("<script>alert('xss')</script>").render()
    assert rendered == "<span>&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;</span>"
    assert "<script>" not in rendered


@pytest.mark.parametrize("char", MARKUP_CHARS)
def test_text_payload_never_leaks_markup(char: str):
    rendered = TextElement(f"a{char}b").render()
    inner = rendered[len("<span>") : -len("</span>")]
    stripped = re.sub(r"&(amp|lt|gt|quot|#x27);", "", inner)
    assert stripped == "ab"


@pytest.mark.parametrize("payload", ["", "<b>Bold</b> text", "&amp; already", "<script>x</script>"])
def test_raw_html_is_verbatim(payload: str):
    assert RawHtml(payload).render() == payload


def test_image_defaults_alt_to_empty():
    assert ImageElement("cat.jpg").render() == '<img src="cat.jpg" alt="" />'


def test_image_with_alt():
    assert ImageElement("cat.jpg").with_alt("Cute Cat").render() == '<img src="cat.jpg" alt="Cute Cat" />'


def test_image_extra_attributes_follow_src_and_alt():
    image = ImageElement("cat.jpg").with_attribute("width", "1").with_attribute("height", "2").with_attribute("width", "3")
    assert image.render() == '<img src="cat.jpg" alt="" width="3" height="2" />'


def test_image_attribute_values_are_escaped():
    image = ImageElement('x" onerror="alert(1)').with_alt("<b>")
    rendered = image.render()
    assert rendered == '<img src="x&quot; onerror=&quot;alert(1)" alt="&lt;b&gt;" />'
    soup = BeautifulSoup(rendered, "html.parser")
    assert soup.img.attrs == {"src": 'x" onerror="alert(1)', "alt": "<b>"}


def test_container_attribute_order():
    div = ContainerElement("div").with_id("main").with_class("content").with_text("Hello World!")
    assert div.render() == '<div id="main" class="content"><span>Hello World!</span></div>'


def test_container_other_attributes_after_id_and_class():
    div = ContainerElement("div").with_attribute("data-x", "1").with_class("a").with_id("i")
    assert div.render() == '<div id="i" class="a" data-x="1"></div>'


def test_class_is_idempotent():
    div = ContainerElement("div").with_class("x").with_class("x")
    assert div.classes == ("x",)
    assert div.render() == '<div class="x"></div>'


def test_classes_keep_insertion_order():
    div = ContainerElement("div").with_class("primary").with_class("large").with_class("primary")
    assert 'class="primary large"' in div.render()


def test_attribute_overwrite_last_write_wins():
    rendered = ContainerElement("div").with_attribute("w", "1").with_attribute("w", "2").render()
    assert 'w="2"' in rendered
    assert 'w="1"' not in rendered


def test_container_escapes_attribute_names_and_values():
    rendered = ContainerElement("div").with_attribute('a"b', "<x>").with_id('"q"').render()
    assert rendered == '<div id="&quot;q&quot;" a&quot;b="&lt;x&gt;"></div>'


def test_nested_containers_render_in_order():
    container = (
        ContainerElement("div")
        .with_attribute("class", "container")
        .with_child(TextElement("Nested Content"))
        .with_child(ContainerElement("p").with_child(TextElement("Deep")))
        .with_child(RawHtml("<hr>"))
    )
    assert container.render() == '<div class="container"><span>Nested Content</span><p><span>Deep</span></p><hr></div>'


def test_with_children_appends_all():
    ul = ContainerElement("ul").with_children(ContainerElement("li").with_text(str(i)) for i in range(3))
    soup = BeautifulSoup(ul.render(), "html.parser")
    assert [li.get_text() for li in soup.find_all("li")] == ["0", "1", "2"]


def test_builders_return_new_values():
    base = ContainerElement("div").with_class("a")
    extended = base.with_class("b").with_text("x")
    assert base.classes == ("a",)
    assert base.children == ()
    assert extended.classes == ("a", "b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        base.tag = "span"  # type: ignore[misc]


def test_with_child_rejects_non_nodes():
    with pytest.raises(TypeError):
        ContainerElement("div").with_child("plain string")  # type: ignore[arg-type]


def test_render_node_rejects_unknown_values():
    with pytest.raises(TypeError):
        render_node(object())  # type: ignore[arg-type]


def test_render_is_repeatable():
    tree = ContainerElement("section").with_text("<a & b>").with_child(ImageElement("i.png"))
    assert tree.render() == tree.render()
    assert str(tree) == tree.render()


def test_render_uses_injected_escaper():
    marker = Escaper(text=lambda s: f"[{s}]", attribute=lambda s: s.upper())
    tree = ContainerElement("p").with_id("main").with_text("hi")
    assert tree.render(marker) == '<p id="MAIN"><span>[hi]</span></p>'
    assert tree.render() == '<p id="main"><span>hi</span></p>'


def test_class_attribute_replaces_class_list():
    div = ContainerElement("div").with_class("a").with_attribute("class", "b c b")
    assert div.classes == ("b", "c")
    assert div.render() == '<div class="b c"></div>'


def test_id_attribute_replaces_id():
    assert ContainerElement("div").with_id("a").with_attribute("id", "b").render() == '<div id="b"></div>'


@pytest.mark.parametrize(
    "name, expected",
    [
        ("src", '<img src="b.png" alt="" />'),
        ("alt", '<img src="a.png" alt="b.png" />'),
    ],
)
def test_image_reserved_attributes_are_not_duplicated(name: str, expected: str):
    rendered = ImageElement("a.png").with_attribute(name, "b.png").render()
    assert rendered == expected
    assert rendered.count(f' {name}="') == 1
