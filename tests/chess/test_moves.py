"""Unit tests for /src/chess/moves.py"""

import pytest

from src.chess.board import Board
from src.chess.moves import (
    DIAGONALS,
    STRAIGHTS,
    candidate_bishop_moves,
    candidate_king_moves,
    candidate_knight_moves,
    candidate_pawn_moves,
    candidate_queen_moves,
    candidate_rook_moves,
    is_promotion_square,
    raycasting_move,
    single_step_move,
)
from src.chess.pieces import Piece
from src.chess.square import Square
from src.core.shared_types import Color, PieceKind


def board_from(pieces: dict[str, str]) -> Board:
    """Empty board with the given pieces: {"d4": "Q", "d7": "p"} (upper case White, lower case Black)"""
    board = Board()
    for name, char in pieces.items():
        board.set(Square.from_algebraic(name), Piece.from_char(char))
    return board


def names(squares: set[Square]) -> set[str]:
    return {square.to_algebraic() for square in squares}


# --- RAYCASTING ---
def test_raycasting_move_empty_board() -> None:
    """On an empty board, movements should only be restricted by board dimensions"""
    board = board_from({"a5": "R"})
    a5 = Square.from_algebraic("a5")
    moves = raycasting_move(a5, Color.WHITE, board, [(0, 1), (0, -1)])
    assert len(moves) == 7
    assert all(move.row == a5.row for move in moves)

    moves = raycasting_move(a5, Color.WHITE, board, [(1, 0), (-1, 0)])
    assert len(moves) == 7
    assert all(move.col == a5.col for move in moves)


def test_raycasting_move_w_enemy_blocker() -> None:
    """When running into an enemy piece, still include it (capture) but stop there"""
    board = board_from({"d2": "R", "d5": "p"})
    moves = candidate_rook_moves(Square.from_algebraic("d2"), Color.WHITE, board)
    vertical = {name for name in names(moves) if name[0] == "d"}
    assert vertical == {"d1", "d3", "d4", "d5"}

    board = board_from({"d2": "B", "f4": "p"})
    moves = candidate_bishop_moves(Square.from_algebraic("d2"), Color.WHITE, board)
    assert names(moves) == {"c1", "e3", "f4", "c3", "b4", "a5", "e1"}


def test_raycasting_move_w_friendly_blocker() -> None:
    """When your own piece is blocking, do not include that square and stop the ray"""
    board = board_from({"d2": "R", "d5": "P"})
    moves = candidate_rook_moves(Square.from_algebraic("d2"), Color.WHITE, board)
    vertical = {name for name in names(moves) if name[0] == "d"}
    assert vertical == {"d1", "d3", "d4"}

    # Same for black, along a diagonal
    board = board_from({"d2": "b", "f4": "p"})
    moves = candidate_bishop_moves(Square.from_algebraic("d2"), Color.BLACK, board)
    assert names(moves) == {"c1", "e3", "c3", "b4", "a5", "e1"}


def test_raycasting_move_w_mixed_blockers() -> None:
    """Blockers of both colors on the same file: stop before your own, capture the first enemy"""
    board = board_from({"a7": "P", "a5": "R", "a1": "p"})
    moves = raycasting_move(Square.from_algebraic("a5"), Color.WHITE, board, [(1, 0), (-1, 0)])
    assert names(moves) == {"a4", "a3", "a2", "a1", "a6"}


# --- SINGLE STEP ---
def test_single_move_in_bounds() -> None:
    board = board_from({"d4": "N"})
    moves = single_step_move(Square.from_algebraic("d4"), Color.WHITE, board, [(-4, -2)])
    assert names(moves) == {"b8"}


def test_single_move_out_of_bounds() -> None:
    """Attempt to move your piece outside of the board: Should return empty set"""
    board = board_from({"d4": "N"})
    moves = single_step_move(Square.from_algebraic("d4"), Color.WHITE, board, [(42, 23)])
    assert moves == set()


def test_single_step_w_enemy_and_friendly_blocker() -> None:
    board = board_from({"d4": "K", "d5": "p", "e4": "P"})
    d4 = Square.from_algebraic("d4")
    assert names(single_step_move(d4, Color.WHITE, board, [(-1, 0)])) == {"d5"}
    assert single_step_move(d4, Color.WHITE, board, [(0, 1)]) == set()


# --- PAWNS ---
def test_white_pawn_from_starting_row() -> None:
    board = board_from({"e2": "P"})
    moves = candidate_pawn_moves(Square.from_algebraic("e2"), Color.WHITE, board)
    assert names(moves) == {"e3", "e4"}


def test_black_pawn_from_starting_row() -> None:
    """Black moves towards increasing rows (down the board)"""
    board = board_from({"d7": "p"})
    moves = candidate_pawn_moves(Square.from_algebraic("d7"), Color.BLACK, board)
    assert names(moves) == {"d6", "d5"}


def test_pawn_double_step_only_from_starting_row() -> None:
    board = board_from({"e3": "P", "c5": "p"})
    assert names(candidate_pawn_moves(Square.from_algebraic("e3"), Color.WHITE, board)) == {"e4"}
    assert names(candidate_pawn_moves(Square.from_algebraic("c5"), Color.BLACK, board)) == {"c4"}


@pytest.mark.parametrize(
    "blocker, expected",
    [
        ("e3", set()),  # intermediate square blocked: neither step
        ("e4", {"e3"}),  # destination of double step blocked
    ],
)
def test_pawn_blocked(blocker: str, expected: set[str]) -> None:
    """Pawns cannot capture forward, and the double step needs both squares empty"""
    board = board_from({"e2": "P", blocker: "n"})
    moves = candidate_pawn_moves(Square.from_algebraic("e2"), Color.WHITE, board)
    assert names(moves) == expected


def test_pawn_captures_diagonally() -> None:
    board = board_from({"e4": "P", "d5": "p", "f5": "P", "e5": "p"})
    moves = candidate_pawn_moves(Square.from_algebraic("e4"), Color.WHITE, board)
    # d5: enemy, f5: own piece, e5: blocked forward
    assert names(moves) == {"d5"}


def test_pawn_does_not_capture_backwards_or_on_empty_diagonal() -> None:
    board = board_from({"e4": "p", "d5": "P", "f5": "P"})
    moves = candidate_pawn_moves(Square.from_algebraic("e4"), Color.BLACK, board)
    assert names(moves) == {"e3"}


def test_pawn_on_edge_of_board() -> None:
    """Capture squares off the board are skipped, a pawn on the last row has nowhere to go"""
    board = board_from({"a2": "P", "b3": "p", "h8": "P"})
    assert names(candidate_pawn_moves(Square.from_algebraic("a2"), Color.WHITE, board)) == {"a3", "a4", "b3"}
    assert candidate_pawn_moves(Square.from_algebraic("h8"), Color.WHITE, board) == set()


# --- KNIGHTS ---
def test_knight_in_center() -> None:
    board = board_from({"d4": "N"})
    moves = candidate_knight_moves(Square.from_algebraic("d4"), Color.WHITE, board)
    assert names(moves) == {"b3", "b5", "c2", "c6", "e2", "e6", "f3", "f5"}


def test_knight_in_corner_with_blockers() -> None:
    board = board_from({"a1": "N", "b3": "P", "c2": "p"})
    moves = candidate_knight_moves(Square.from_algebraic("a1"), Color.WHITE, board)
    assert names(moves) == {"c2"}


def test_knight_jumps_over_pieces() -> None:
    board = Board.standard()
    moves = candidate_knight_moves(Square.from_algebraic("g8"), Color.BLACK, board)
    assert names(moves) == {"f6", "h6"}


# --- SLIDING PIECES ---
def test_bishop_on_empty_board() -> None:
    board = board_from({"d4": "B"})
    moves = candidate_bishop_moves(Square.from_algebraic("d4"), Color.WHITE, board)
    assert len(moves) == 13
    assert all(abs(move.row - 4) == abs(move.col - 3) for move in moves)


def test_rook_on_empty_board() -> None:
    board = board_from({"d4": "R"})
    moves = candidate_rook_moves(Square.from_algebraic("d4"), Color.WHITE, board)
    assert len(moves) == 14


def test_queen_is_rook_plus_bishop() -> None:
    board = board_from({"d4": "Q", "d6": "p", "f6": "P", "b2": "p", "g4": "P"})
    d4 = Square.from_algebraic("d4")
    queen = candidate_queen_moves(d4, Color.WHITE, board)
    rook = candidate_rook_moves(d4, Color.WHITE, board)
    bishop = candidate_bishop_moves(d4, Color.WHITE, board)
    assert queen == rook | bishop
    assert raycasting_move(d4, Color.WHITE, board, STRAIGHTS + DIAGONALS) == queen
    assert "d6" in names(queen) and "d7" not in names(queen)
    assert "f6" not in names(queen) and "e5" in names(queen)


def test_sliding_pieces_blocked_in_starting_position() -> None:
    board = Board.standard()
    for name in ["a1", "c1", "d1", "f1", "h1"]:
        square = Square.from_algebraic(name)
        piece = board.get(square)
        assert piece is not None
        assert piece.legal_moves(square, board) == set()


# --- KING ---
def test_king_moves() -> None:
    board = board_from({"e1": "K", "d1": "Q", "e2": "p"})
    moves = candidate_king_moves(Square.from_algebraic("e1"), Color.WHITE, board)
    assert names(moves) == {"d2", "e2", "f2", "f1"}


def test_king_ignores_attacked_squares() -> None:
    """No self-check filtering: a king may step next to the enemy king or into a rook's line"""
    board = board_from({"e4": "K", "e6": "k", "a5": "r"})
    moves = candidate_king_moves(Square.from_algebraic("e4"), Color.WHITE, board)
    assert {"e5", "d5", "f5"} <= names(moves)
    assert len(moves) == 8


def test_no_castling() -> None:
    board = board_from({"e1": "K", "h1": "R"})
    moves = candidate_king_moves(Square.from_algebraic("e1"), Color.WHITE, board)
    assert "g1" not in names(moves)


# --- GENERAL PROPERTIES ---
def test_never_capture_own_piece() -> None:
    """For every piece in a crowded position, no candidate square holds a piece of the same color"""
    board = board_from(
        {
            "d4": "Q",
            "e5": "P",
            "c3": "N",
            "b6": "b",
            "d7": "r",
            "f6": "n",
            "e4": "K",
            "c5": "p",
            "g7": "k",
            "a4": "R",
            "h4": "B",
        }
    )
    for square in board.occupied_squares():
        piece = board.get(square)
        assert piece is not None
        for target in piece.legal_moves(square, board):
            occupant = board.get(target)
            assert occupant is None or occupant.color != piece.color


@pytest.mark.parametrize(
    "name, color, expected",
    [("e8", Color.WHITE, True), ("e1", Color.WHITE, False), ("e1", Color.BLACK, True), ("e8", Color.BLACK, False)],
)
def test_is_promotion_square(name: str, color: Color, expected: bool) -> None:
    assert is_promotion_square(Square.from_algebraic(name), color) == expected


def test_piece_dispatch_matches_rule_functions() -> None:
    board = board_from({"d4": "N"})
    d4 = Square.from_algebraic("d4")
    piece = Piece(Color.WHITE, PieceKind.KNIGHT)
    assert piece.legal_moves(d4, board) == candidate_knight_moves(d4, Color.WHITE, board)
