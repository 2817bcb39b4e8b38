"""
Teclados inline para navegação no bot
"""
from typing import List
from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from src.config import WEEKDAYS

class InlineKeyboards:
    """Teclados inline do bot"""

    @staticmethod
    def main_menu() -> InlineKeyboardMarkup:
        """Menu principal"""
        keyboard = [
            [
                InlineKeyboardButton("🏋️ Meu treino", callback_data="workout"),
                InlineKeyboardButton("🥗 Minha dieta", callback_data="meal_plan")
            ],
            [
                InlineKeyboardButton("📈 Minha evolução", callback_data="progress"),
                InlineKeyboardButton("⚖️ Registrar peso", callback_data="register_weight")
            ],
            [
                InlineKeyboardButton("ℹ️ Ajuda", callback_data="help")
            ]
        ]
        return InlineKeyboardMarkup(keyboard)

    @staticmethod
    def workout_days(days: List[int]) -> InlineKeyboardMarkup:
        """Um botão por dia de treino"""
        keyboard = [
            [InlineKeyboardButton(f"📅 {WEEKDAYS[day]}", callback_data=f"workout_day_{day}")]
            for day in days
        ]
        keyboard.append([InlineKeyboardButton("🏠 Menu principal", callback_data="main_menu")])
        return InlineKeyboardMarkup(keyboard)

    @staticmethod
    def back_to_workout() -> InlineKeyboardMarkup:
        """Voltar à lista de dias"""
        keyboard = [
            [
                InlineKeyboardButton("🔙 Dias de treino", callback_data="workout"),
                InlineKeyboardButton("🏠 Menu principal", callback_data="main_menu")
            ]
        ]
        return InlineKeyboardMarkup(keyboard)

    @staticmethod
    def progress_actions() -> InlineKeyboardMarkup:
        """Ações da evolução"""
        keyboard = [
            [
                InlineKeyboardButton("⚖️ Registrar peso", callback_data="register_weight"),
                InlineKeyboardButton("🏠 Menu principal", callback_data="main_menu")
            ]
        ]
        return InlineKeyboardMarkup(keyboard)

    @staticmethod
    def skip_body_fat() -> InlineKeyboardMarkup:
        """Pular o percentual de gordura"""
        keyboard = [[InlineKeyboardButton("⏭ Pular", callback_data="skip_body_fat")]]
        return InlineKeyboardMarkup(keyboard)

    @staticmethod
    def back_to_menu() -> InlineKeyboardMarkup:
        """Botão de volta ao menu principal"""
        keyboard = [[InlineKeyboardButton("🏠 Menu principal", callback_data="main_menu")]]
        return InlineKeyboardMarkup(keyboard)
