# smitto

Small building blocks for applications.

## Modules

- `smitto.colors`: the base palette `SmittoBaseColors` with `scolor(color)` giving its hex code, and the eight terminal colours `ConsoleColors` with `ccolor(color, bold)` mapping them onto the palette. Unknown entries give `"#000000"`.
- `smitto.stylesheets`: `level_stylesheet(level)` returns the widget style sheet for palette levels 1 to 12 (level 0 gives `EMPTY_STYLESHEET`); other levels raise `ValueError`.
- `smitto.theme`: the `Themes` enum (`LIGHT`, `DARK`), `themes()`, `theme_name(theme)`, `next_theme(current)` and the `Theme` dataclass with a `palette` dict and a `name()` method.
- `smitto.platformspec`: icon and panel metrics: `icon_size`, `panel_size`, `panel_icon_size`, `panel_margin`, `panel_spacing`. Each takes `android=None` (detect the platform) or an explicit `True`/`False`; sizes are `Size(width, height)` tuples.
- `smitto.keyvalue`: `KeyValueRecord` parses and writes `key: value; keyword;` strings. A literal `:` or `;` is written doubled (`::`, `;;`). `create_str()` writes pairs ordered by key, then keywords in insertion order.
- `smitto.files`: `read_all_file(path)` returns the file's bytes, or `b""` if it cannot be read; `write_to_file(path, data)` replaces the file's content (text is written as UTF-8). Failures are logged, not raised.
- `smitto.recordfile`: `read_records_from_file(path, record_class=None)` parses each line as a `KeyValueRecord` and passes it to `record_class`; a missing file gives an empty list.
- `smitto.paths`: `tmp_path()`, `app_data_path(app_name=None)` (per-user data directory via platformdirs) and `app_objects_path(app_dir=None)` (an `Objects` directory next to the running script). Both directories are created if missing.
- `smitto.exit`: exit codes (`APP_UPDATE_EXIT_CODE` 198, `APP_RESTART_EXIT_CODE` 199, `APP_NORMAL_EXIT_CODE` 200, `APP_SIGINT_EXIT_CODE` 201, `APP_SIGTERM_EXIT_CODE` 202), `signal_name(sig)`, `exit_code_for_signal(sig)`, and `ExitHelper(on_exit)`, whose `install()` registers handlers for SIGINT, SIGTERM and, on Linux, SIGUSR1, calling `on_exit` with the matching code.
- `smitto.service`: `Service`, an abstract periodic worker. Subclasses implement `process_work()` and may override `prepare_start()` and `process_stop()`. It offers `start()`, `stop()`, `toggle()`, `started()`, `work()`, `active_changed_handlers`, timing diagnostics through `dlog` and `notify_timeout_ns`, and can be used as a context manager.
- `smitto.shadowtimer`: `ShadowTimer(interval, clock)` ticks in the background and logs, and counts in `overruns`, ticks that arrive more than 5 ms late. `tick()` can also be called by hand.
- `smitto.telegram`: `TelegramService(token, botname, settings, session)`, a `Service` that polls the bot's `getUpdates` each second, passes texts of messages from `chat_id` to `message_received_handlers`, sends messages with `send_message(text, chat_id)`, and keeps the last update id under `"TelegramBot/update_id"` in `settings`.

## Install

    pip install smitto

Run the tests with:

    pip install "smitto[test]"
    pytest

## Example

    from smitto.keyvalue import KeyValueRecord

    record = KeyValueRecord("name: Alice; admin;")
    record.value("name")          # "Alice"
    record.contains("admin")      # True
    record.set_key_value("age", 30)
    record.create_str()           # "age:30;name:Alice;admin;"

    from smitto.colors import ConsoleColors, ccolor

    ccolor(ConsoleColors.RED, bold=True)   # "#ef2929"

A service:

    from smitto.service import Service

    class Heartbeat(Service):
        def process_work(self):
            print("tick")

    with Heartbeat("heartbeat", interval=0.5):
        ...

## What it does not do

The package has no widgets or windows: the colours, style sheets, themes and metrics are plain values for whatever toolkit you use. It has no server for remote client sessions, no user or database record types, and no database configuration. It provides no command-line program.