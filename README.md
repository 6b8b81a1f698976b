# termodoro

A pomodoro timer for the terminal. It opens a full-screen menu from which
you can browse the timers stored in its database and open a form for a new
timer.

## Installation

```
pip install .
```

## Usage

Start the application in its menu:

```
termodoro
```

`termodoro menu` does the same. Both the configuration file and the timer
database have default locations in your per-user configuration and data
directories (`termodoro/config.toml` and `termodoro/termodoro.db`); the
directories are created if needed. Either path can be overridden:

```
termodoro --config ./config.toml --db ./timers.db
```

A missing configuration file is not an error; built-in defaults are used.
The database and its `timers` table are created on first use. If the
application cannot start, it prints `termodoro: error: ...` to standard
error and exits with status 1.

### Keys

In the menu:

| Key     | Action                  |
|---------|-------------------------|
| ↑ / ↓   | move                    |
| enter   | select                  |
| h       | show or hide full help  |
| q       | quit                    |

The menu offers Timers, Settings, Rewards and Quit.

In the timer list, ↑ / ↓ move, `n` opens the form for a new timer, `h`
toggles the full help and `q` quits.

The form has four fields (timer name, description, minutes to work, minutes
to rest) and a Submit button. ↑ / ↓ move the focus between them, printable
keys are typed into the focused field, `h` toggles the help (and so cannot
be typed into a field), and `esc` quits the application.

## What it does not do

- Timers are not run: there is no countdown for the focus and rest periods.
- The new-timer form does not save anything; Submit has no effect. Timers
  only appear in the list if they are already in the database.
- The Settings and Rewards menu entries do nothing when selected.
- The `[keys]` table of the configuration file is read and checked, but the
  screens use their own fixed keys listed above.

## Configuration

The configuration file is TOML:

```toml
debug_mode = false

[keys]
force_quit = ["ctrl+c"]
exit = ["esc"]
help = ["?"]
up = ["w"]
down = ["s"]
left = ["a"]
right = ["d"]
```

`debug_mode` defaults to `true`. A value of the wrong type, or a file that
is not valid TOML, raises `termodoro.config.ConfigError`.
`termodoro.config.default_keys()` returns the bindings shown above.

## Using it as a library

```python
from termodoro.data import open_database_connection, TimerRepositorySQLite

db = open_database_connection("timers.db")
for timer in TimerRepositorySQLite(db).get_all_timers():
    print(timer.name, timer.focus_duration, timer.rest_duration)
```

`get_all_timers()` raises `termodoro.data.DataError` if a stored timer has
an empty (NULL) column.

## Development

```
pip install -e ".[test]"
pytest
```