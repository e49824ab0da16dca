from unittest.mock import MagicMock

from graphselect.geometry import Rectangle
from graphselect.host import Container
from graphselect.selection.overlay import SelectionOverlay
from graphselect.selection.settings import create_settings


def test_overlay_starts_hidden_and_inert():
    overlay = SelectionOverlay(create_settings())
    assert not overlay.is_visible
    assert overlay.style['pointer-events'] == 'none'
    assert overlay.style['position'] == 'absolute'
    assert overlay.class_name == 'graph-selection-rectangle'


def test_move_to_clamps_drawn_size_only():
    overlay = SelectionOverlay(create_settings())
    drawn = overlay.move_to(Rectangle(5, 6, 0, 30))

    assert drawn == Rectangle(5, 6, 2, 30)
    assert overlay.style['left'] == '5px'
    assert overlay.style['top'] == '6px'
    assert overlay.style['width'] == '2px'
    assert overlay.style['height'] == '30px'


def test_render_callback_receives_style_copies():
    on_render = MagicMock()
    overlay = SelectionOverlay(create_settings(), on_render=on_render)

    overlay.show()
    overlay.hide()

    assert on_render.call_count == 2
    assert on_render.call_args_list[0][0][0]['display'] == 'block'
    rendered = on_render.call_args[0][0]
    assert rendered['display'] == 'none'
    assert rendered is not overlay.style


def test_mount_and_unmount_once():
    container = Container()
    overlay = SelectionOverlay(create_settings())

    overlay.mount(container)
    overlay.mount(container)
    assert container.children == [overlay]
    assert overlay.is_mounted

    assert overlay.unmount() is True
    assert overlay.unmount() is False
    assert container.children == []


def test_css_string():
    overlay = SelectionOverlay(create_settings(z_index=3, border_style='none', background='red'))
    assert overlay.css() == (
        'display: none; position: absolute; pointer-events: none; '
        'z-index: 3; border: none; background: red'
    )
