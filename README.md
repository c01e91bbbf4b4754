# kernui

kernui holds the logic behind a small signing device's screens and its QR codes. It has no dependency on any display toolkit. Each component is a plain Python object that keeps state and runs callbacks.

## Modules

- `kernui.qrparts` collects QR frames and joins them back into one payload.
  - `QRPartParser.parse()` detects the format from the first frame. It accepts plain single frames (`QRFormat.NONE`) and "pMofN" frames (`QRFormat.PMOFN`).
  - `is_complete()`, `parsed_count()`, `total_count()` and `result()` report progress and return the assembled payload.
  - Frames that start with `ur:` are recognised as `QRFormat.UR`. They are decoded only if you pass a `ur_decoder_factory` that returns a UR decoder object. Without one, `parse()` returns `None` for those frames.
  - Sizing helpers: `detect_format`, `parse_pmofn_part`, `max_qr_bytes`, `find_min_num_parts` and `get_qr_size`.
- `kernui.mnemonic_qr` reads a BIP39 mnemonic from scanned QR data. The data may hold plaintext words, a SeedQR (4 digits per word, 48 or 96 digits) or a Compact SeedQR (16 or 32 bytes of raw entropy).
  - `detect_format` guesses the format.
  - `to_mnemonic` returns `(mnemonic, format)`.
  - `compact_to_mnemonic`, `seedqr_to_mnemonic`, `entropy_to_mnemonic` and `validate_mnemonic` do the individual steps. `format_name` gives a readable name for a format.
  - Invalid data raises `MnemonicQRError`, a subclass of `ValueError`. Its `fmt` attribute carries the detected format.
  - You supply the 2048-word wordlist.
- `kernui.theme` defines the palette, font sizes, dimensions and style dictionaries.
  - `Color` has `from_hex` and `to_hex`.
  - `Theme` holds the styles. `Theme.button_style()` returns the style for the `"default"`, `"pressed"` or `"disabled"` state.
- `kernui.qr_viewer` handles paged QR display.
  - `split_content` cuts long content into "pMofN"-prefixed frames of at most 400 characters.
  - `QRViewer` tracks the current frame. `advance()` moves to the next frame and `tap()` runs the return callback.
  - `progress_layout` and `qr_display_size` compute the geometry.
- `kernui.keyboard` provides a QWERTY key grid.
  - `Keyboard.press()` sends a key's character only if that key is enabled.
  - Keys are switched on and off with `set_key_enabled`, `set_letters_enabled`, `enable_all` and `set_ok_enabled`.
  - `set_input_text` shows the typed text followed by a cursor.
  - `key_index_for_button` and `button_for_key_index` map between button positions and logical keys.
- `kernui.menu` provides touch menus.
  - `Menu` supports `add_entry`, `set_entry_enabled`, `click` and `back`. Its entries are `MenuEntry` objects.
  - `create_word_count_selector` builds the "Mnemonic Length" menu with 12 and 24 words. It acts only once.
- `kernui.dialogs` provides three kinds of dialog.
  - `PromptDialog` is a yes/no prompt. Call `answer(True/False)` with the user's choice.
  - `FlashError` is an error message with a timeout, 2000 ms by default. `expire()` runs the callback and closes it.
  - `SimpleDialog` is a message box with an OK button. `close()` dismisses it.

## Examples

```python
from kernui.qrparts import QRPartParser

parser = QRPartParser()
for frame in ["p2of2 world", "p1of2 hello "]:
    parser.parse(frame)

if parser.is_complete():
    print(parser.result())  # "hello world"
```

```python
from kernui.mnemonic_qr import MnemonicQRError, format_name, to_mnemonic

with open("english.txt") as f:
    wordlist = f.read().split()

try:
    mnemonic, fmt = to_mnemonic(scanned_bytes, wordlist)
    print(format_name(fmt), mnemonic)
except MnemonicQRError as exc:
    print("not a mnemonic:", exc, format_name(exc.fmt))
```

## What it does not do

- It draws nothing. There are no screens, widgets or timers. You drive the components by calling their methods, for example `QRViewer.advance()` on each animation tick or `FlashError.expire()` when the timeout has passed.
- It does not render QR images.
- It contains no UR (fountain-code) decoder or encoder.
- It does not recognise BBQr frames. `find_min_num_parts` can still size BBQr parts.
- It does no key management, address derivation or wallet handling.

## Running the tests

```
pip install -e .[test]
pytest
```