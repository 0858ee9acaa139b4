import logging
from typing import Callable, List, Optional

from .state import *
from .game import GameUI, GameMode, Reversi, UNDO, ABORT
from .config import CONFIG

ERROR_MSG = "Ошибка! Такой вариант отсутствует"
MENU = """Введите номер желаемого режима игры:
1. Против компьютера (лёгкий)\t\tРекорд: {easy}
2. Против компьютера (продвинутый)\tРекорд: {hard}
3. Игрок против игрока\t\t\t\tРекорд: {pvp}
0. Выйти"""

def render_board(board, black_score: int, white_score: int, title: str = "") -> str:
    d = CONFIG.display
    symbols = {EMPTY: d.empty, BLACK: d.black, WHITE: d.white, MARKED: d.marked}
    lines = [title, f"Чёрные: {black_score}  Белые: {white_score}"]
    for i in range(SIZE):
        lines.append(f"{SIZE - i} " + " ".join(symbols[int(v)] for v in board[i]))
    lines.append("  " + " ".join(chr(ord("a") + j) for j in range(SIZE)))
    return "\n".join(lines)

def _read_int(read: Callable[[str], str], prompt: str = "") -> Optional[int]:
    s = read(prompt).strip()
    try:
        return int(s)
    except ValueError:
        return None

class ConsoleUI(GameUI):
    def __init__(self, read: Callable[[str], str] = input, write: Callable[[str], None] = print):
        self.read = read; self.write = write

    def notify_turn(self, color, board, scores):
        self.write(render_board(board, *scores, title="Ход " + ("чёрных" if color == BLACK else "белых")))

    def request_move_choice(self, color, destinations: List[Position], undo_available):
        lo = 0 if undo_available else 1
        while True:
            self.write("Введите номер желаемого хода:")
            for n, to in enumerate(destinations, 1):
                self.write(f"{n}. {to}")
            if undo_available:
                self.write("0. Отменить предыдущий ход")
            self.write("-1. Вернуться в главное меню")
            try:
                opt = _read_int(self.read)
            except EOFError:
                return ABORT
            if opt == -1: return ABORT
            if opt is not None and lo <= opt <= len(destinations):
                return UNDO if opt == 0 else opt - 1
            self.write(ERROR_MSG)

    def notify_computer_move(self, destination):
        self.write(f"Компьютер делает ход {destination}")

    def notify_game_result(self, winner):
        if winner == BLACK: self.write("Победа чёрных!")
        elif winner == WHITE: self.write("Победа белых!")
        else: self.write("Ничья!")

    def notify_new_high_score(self):
        self.write("Новый рекорд!")

    def notify_invalid_choice(self):
        self.write(ERROR_MSG)

def main_menu(session: Reversi, ui: ConsoleUI):
    hs = session.high_scores
    while True:
        ui.write(MENU.format(easy=hs.get(GameMode.VS_AI_EASY), hard=hs.get(GameMode.VS_AI_HARD),
                             pvp=hs.get(GameMode.VS_HUMAN)))
        try:
            opt = _read_int(ui.read)
        except EOFError:
            return
        try:
            mode = GameMode(opt)
        except ValueError:
            ui.write(ERROR_MSG); continue
        if mode is GameMode.QUIT:
            return
        session.play(mode)

def main():
    logging.basicConfig(level=CONFIG.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    ui = ConsoleUI()
    main_menu(Reversi(ui), ui)
