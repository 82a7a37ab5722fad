"""Qt chrome around the board: promotion chooser, move input, editor session."""
