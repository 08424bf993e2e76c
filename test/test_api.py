import deferio


def test_exports():
    for name in deferio.__all__:
        assert hasattr(deferio, name), name


def test_version():
    assert deferio.__version__.count(".") == 2
