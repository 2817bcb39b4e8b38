"""
Configuração da aplicação
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Supabase
SUPABASE_URL = os.getenv("SUPABASE_URL")
SUPABASE_SERVICE_ROLE_KEY = os.getenv("SUPABASE_SERVICE_ROLE_KEY") or os.getenv("SUPABASE_KEY")

# Telegram
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")

# API HTTP
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Idade fixa: a idade do cliente não é coletada
DEFAULT_AGE = 30

ACTIVITY_MULTIPLIERS = {
    "sedentary": 1.2,     # Sedentário
    "light": 1.375,       # Leve (1-3 vezes por semana)
    "moderate": 1.55,     # Moderada (3-5 vezes por semana)
    "active": 1.725,      # Ativa (6-7 vezes por semana)
    "very_active": 1.9    # Muito ativa (2 vezes por dia)
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.55

# Ajuste calórico por objetivo (kcal); objetivos ausentes não alteram o TDEE
GOAL_CALORIE_ADJUSTMENTS = {
    "lose_weight": -500,
    "gain_muscle": 300
}

WORKOUT_DURATION_WEEKS = 12

FITNESS_GOALS = {
    "lose_weight": "Emagrecimento",
    "gain_muscle": "Ganho de massa",
    "maintain": "Manutenção",
    "improve_endurance": "Resistência"
}

ACTIVITY_LEVELS = {
    "sedentary": "Sedentário",
    "light": "Leve",
    "moderate": "Moderada",
    "active": "Ativa",
    "very_active": "Muito ativa"
}

GENDERS = ("male", "female", "other")

MEAL_TYPES = {
    "breakfast": "Café da Manhã",
    "snack": "Lanche",
    "lunch": "Almoço",
    "dinner": "Jantar"
}

WEEKDAYS = {
    0: "Domingo",
    1: "Segunda-feira",
    2: "Terça-feira",
    3: "Quarta-feira",
    4: "Quinta-feira",
    5: "Sexta-feira",
    6: "Sábado"
}

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Client-Info, Apikey"
}
