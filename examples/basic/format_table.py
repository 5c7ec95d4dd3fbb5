"""Read, repair and format a pipe table in 3 lines."""

from tablero import complete_table, format_table, read_table

raw = read_table(["| fruit | qty |", "|:--|--:|", "| apple | 3 |", "| kiwi |"])
formatted = format_table(complete_table(raw).table)
print("\n".join(formatted.table.to_lines()))
