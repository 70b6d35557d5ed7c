from duckdemo.asset_tracking import ResourceHandles


def test_resource_published_only_when_loaded():
    handles = ResourceHandles()
    handles.load_resource("level", lambda: {"music": "song.ogg"})
    resources = {}
    assert handles.update(resources, lambda value: False) == []
    assert resources == {}
    assert not handles.is_all_done()

    assert handles.update(resources, lambda value: True) == ["level"]
    assert resources == {"level": {"music": "song.ogg"}}
    assert handles.is_all_done()
    assert handles.finished == ("level",)


def test_factory_called_once_at_load_time():
    calls = []
    handles = ResourceHandles()
    handles.load_resource("player", lambda: calls.append(1) or "assets")
    assert calls == [1]
    resources = {}
    handles.update(resources, lambda value: False)
    handles.update(resources, lambda value: True)
    assert calls == [1]
    assert resources["player"] == "assets"


def test_partial_loading_keeps_others_waiting():
    handles = ResourceHandles()
    handles.load_resource("a", lambda: "ready")
    handles.load_resource("b", lambda: "pending")
    resources = {}
    published = handles.update(resources, lambda value: value == "ready")
    assert published == ["a"]
    assert handles.waiting == ("b",)
    assert "b" not in resources
    assert not handles.is_all_done()


def test_empty_tracker_is_done():
    handles = ResourceHandles()
    assert handles.is_all_done()
    assert handles.update({}, lambda value: True) == []


def test_load_resource_chains():
    handles = ResourceHandles()
    result = handles.load_resource("x", lambda: 1).load_resource("y", lambda: 2)
    assert result is handles
    assert handles.waiting == ("x", "y")