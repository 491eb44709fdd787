from handmenu.session import Session


def test_round_trip(tmp_path):
    path = tmp_path / "state.tmp"
    original = Session(
        section=2,
        link=5,
        selector_element=7,
        selector_dir="/roms/nes",
        udc=21,
        tvout=25,
        curr_backdrop="/skins/bd.png",
        explorer_last_dir="/media/sd",
    )
    assert original.write(path)
    assert Session.read(path) == original


def test_explorer_dir_omitted_when_empty(tmp_path):
    path = tmp_path / "state.tmp"
    Session(section=1).write(path)
    text = path.read_text()
    assert "explorerLastDir" not in text
    assert text.splitlines()[0] == "section=1"


def test_read_parses_and_ignores_unknown(tmp_path):
    path = tmp_path / "state.tmp"
    path.write_text("section = 3\nlink=4\nbogus=9\nselectorDir= /a b \n")
    session = Session.read(path)
    assert session.section == 3
    assert session.link == 4
    assert session.selector_dir == "/a b"


def test_missing_values_keep_defaults(tmp_path):
    path = tmp_path / "state.tmp"
    path.write_text("link=1\n")
    assert Session.read(path) == Session(link=1)


def test_consume_deletes_file(tmp_path):
    path = tmp_path / "state.tmp"
    Session(link=6).write(path)
    session = Session.consume(path)
    assert session.link == 6
    assert not path.exists()


def test_consume_missing_returns_none(tmp_path):
    assert Session.consume(tmp_path / "nothing.tmp") is None


def test_write_to_missing_directory_fails(tmp_path):
    assert Session().write(tmp_path / "no" / "such" / "file") is False