# handmenu

This package holds the decision-making part of a launcher menu for small
handheld devices. It does no drawing. It works out what should happen and
where things should go, and a front end does the rendering.

## Modules

- `handmenu.filelister`: `FileLister` lists a single directory. Directories
  come first, then favourite files, then all files that match. A favourite
  file shows up in both of the last two groups. You can set a comma-separated
  extension filter in `filter`, hide entries with `add_exclude`, and mark
  favourites with `add_favourite`. Excluding `".."` also turns off going up a
  directory.
- `handmenu.browser`: `Browser` is a `FileLister` that adds the state of a
  browse dialog:
  - a selection that wraps around (`move`);
  - paging that stops at the ends (`page`);
  - jumping to the next or previous first letter (`jump_letter`);
  - a history of entered directories that `dir_up` uses to restore the
    selection;
  - `confirm` and `preview` for image files;
  - bottom-bar `button_hints` and `context_options`;
  - `random_file` and `delete_selected`.
- `handmenu.layout`: `Rect`, the `Align` flags, `scroll_bar_rect`,
  `slider_fill`, and the `button_row` and `button_row_right` layouts.
- `handmenu.text`: `text_width`, `text_height`, `wrap_text` and
  `align_lines`. Each one uses whatever width function you pass it.
- `handmenu.inputmanager`:
  - `parse_input_config` reads `name=type,values` lines. A type is
    `keyboard`, `joystickbutton` or `joystickaxis`.
  - `InputManager`, which you can build with `InputManager.from_file`, turns
    `KeyEvent`s and joystick state into active `Action`s.
  - It tracks repeat intervals and detects the secret ten-action `combo`.
  - `hardware_monitor` compares `HardwareState` readings and reports which
    virtual action to raise.
- `handmenu.hotkeys`: `menu_combo` covers combinations held together with
  MENU. `classify` maps active actions to a `CommonAction`. `volume_step` and
  `backlight_step` each run one round of the volume or backlight popup.
- `handmenu.explorer`:
  - `classify_file` decides how a chosen file is opened and returns a
    `FileKind`.
  - `skin_name_from_zip`, `launch_command`, `ipk_install_command` and
    `add_link_filter` build names, commands and filters.
  - `unique_link_path` and `unique_screenshot_path` find file names that are
    not in use.
- `handmenu.keyboard`: `VirtualKeyboard` holds the text being typed. It has
  seven key layouts, a selected key that wraps at the edges, and `confirm`,
  `backspace` and `space`.
- `handmenu.session`: `Session` reads and writes the `name=value` state that
  is kept while a program runs. `Session.consume` reads the file and then
  deletes it.

## Installing

```
pip install .
```

## Example

```python
from handmenu.filelister import FileLister
from handmenu.inputmanager import Action, InputManager, KeyEvent, parse_input_config
from handmenu.keyboard import VirtualKeyboard
from handmenu.text import wrap_text

lister = FileLister()
lister.filter = ".png,.jpg"
lister.browse("/tmp")
for index in range(len(lister)):
    print(lister.get_path(index))

manager = InputManager(parse_input_config(["up=keyboard,273"]))
manager.process(KeyEvent(key=273))   # True
manager.is_active(Action.UP)         # True

keyboard = VirtualKeyboard()
keyboard.move(cols=2)
keyboard.confirm()                   # "e"

wrap_text("the quick brown fox", 10, len)   # "the quick\nbrown fox"
```

## What it does not do

This package has no screen, no fonts and no event loop. It does not load or
save the menu's main configuration file or a skin's settings, and it has no
command to start a menu. A front end has to supply all of these and call the
functions above.

## Running the tests

```
pip install .[test]
pytest
```