"""Candy Bakery game package.

Public API:
    from game import BakerySim, Order, Tray, evaluate_tray, generate_order, score_serve
"""
from game.entities import DaySummary, Order, ServeResult, SessionState, TrayResult, Verdict
from game.orders import evaluate_tray, generate_order, score_serve
from game.simulation import BakerySim
from game.tray import Tray

__all__ = [
    "BakerySim",
    "DaySummary",
    "Order",
    "ServeResult",
    "SessionState",
    "Tray",
    "TrayResult",
    "Verdict",
    "evaluate_tray",
    "generate_order",
    "score_serve",
]
