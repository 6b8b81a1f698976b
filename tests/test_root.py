import pytest

from termodoro.config import Config
from termodoro.data import open_database_connection
from termodoro.tui.menu import MenuModel
from termodoro.tui.messages import (
    KeyMsg,
    MenuInput,
    SwitchViewMsg,
    TimerListAddInput,
    TimerListInput,
    View,
    WindowSizeMsg,
)
from termodoro.tui.root import (
    TITLE,
    FatalErrorMsg,
    RootModel,
    ViewError,
    fatal_error_cmd,
)
from termodoro.tui.timerlist import TimerListAddModel, TimerListModel
from termodoro.tui.widgets import BlinkMsg, SpinnerTickMsg


@pytest.fixture
def db():
    conn = open_database_connection(":memory:")
    yield conn
    conn.close()


def make_root(db, view=View.MENU, switch_in=None):
    return RootModel(view, switch_in if switch_in is not None else MenuInput(), db, Config())


def test_menu_view_starts_with_title(db):
    root = make_root(db)
    text = root.view()
    assert text.startswith(TITLE)
    assert "Settings" in text
    assert isinstance(root.child, MenuModel)


def test_none_input_is_rejected(db):
    with pytest.raises(ViewError, match="not valid"):
        RootModel(View.MENU, None, db, Config())


def test_mismatched_input_is_rejected(db):
    with pytest.raises(ViewError, match="MenuInput"):
        RootModel(View.MENU, TimerListInput(), db, Config())


def test_unknown_view_is_rejected(db):
    with pytest.raises(ViewError, match="invalid view"):
        RootModel(7, MenuInput(), db, Config())


def test_init_returns_spinner_tick_of_child(db):
    root = make_root(db)
    cmd = root.init()
    msg = cmd()
    assert isinstance(msg, SpinnerTickMsg)
    assert msg.id == root.child.spinner.id


def test_add_view_init_starts_blinking(db):
    root = make_root(db, View.TIMER_LIST_ADD, TimerListAddInput(None))
    assert isinstance(root.child, TimerListAddModel)
    assert root.init()() == BlinkMsg()


def test_switch_view_replaces_child(db):
    root = make_root(db)
    cmd = root.update(SwitchViewMsg(View.TIMER_LIST, TimerListInput()))
    assert isinstance(root.child, TimerListModel)
    msg = cmd()
    assert isinstance(msg, SpinnerTickMsg)
    assert msg.id == root.child.spinner.id


def test_failed_switch_yields_fatal_error(db):
    root = make_root(db)
    child = root.child
    cmd = root.update(SwitchViewMsg(View.TIMER_LIST, MenuInput()))
    msg = cmd()
    assert isinstance(msg, FatalErrorMsg)
    assert isinstance(msg.error, ViewError)
    assert "setting child model" in str(msg.error)
    assert root.child is child


def test_window_size_is_recorded(db):
    root = make_root(db)
    root.update(WindowSizeMsg(width=120, height=40))
    assert (root.width, root.height) == (120, 40)


def test_keys_reach_child(db):
    root = make_root(db)
    root.update(KeyMsg("down"))
    assert root.child.cursor == 1


def test_menu_selection_switches_to_timer_list(db):
    db.execute(
        "INSERT INTO timers (name, description, focus_duration, rest_duration) "
        "VALUES ('Work', 'desk', 25, 5)"
    )
    root = make_root(db)
    msg = root.update(KeyMsg("enter"))()
    assert msg == SwitchViewMsg(View.TIMER_LIST, TimerListInput())
    root.update(msg)
    assert isinstance(root.child, TimerListModel)
    assert "Work" in root.view()


def test_fatal_error_cmd_wraps_error():
    err = RuntimeError("boom")
    assert fatal_error_cmd(err)() == FatalErrorMsg(err)