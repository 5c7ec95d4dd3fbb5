"""Drive a buffer like an editor would: Tab, Tab, Enter, then undo."""

from tablero import LineBuffer, Point, SmartCursor, TableEditor

buffer = LineBuffer("Notes\n| a | b |\n|---|---|\n| 1 | 2 |", cursor=Point(3, 2))
editor = TableEditor(buffer)

session = SmartCursor()
session = editor.next_cell(session)  # Tab: cell "2"
session = editor.next_cell(session)  # Tab: new third column
session = editor.next_row(session)  # Enter: new row, back to the first column

print(buffer.text)
print("Cursor:", buffer.get_cursor_position())
print("Edits applied:", len(buffer.operations))

buffer.undo()
print()
print("After undo:")
print(buffer.text)
