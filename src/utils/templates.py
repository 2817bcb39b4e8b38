"""
Modelos fixos de refeições e treinos

O conteúdo textual é fixo; somente os valores numéricos das refeições
são escalados a partir das metas do plano.
"""

# Proporções de calorias/proteína/carboidratos/gordura de cada refeição
MEAL_TEMPLATES = [
    {
        "meal_type": "breakfast",
        "name": "Café da Manhã Completo",
        "description": "Refeição energizante para começar o dia",
        "shares": {"calories": 0.25, "protein": 0.25, "carbs": 0.30, "fats": 0.25},
        "ingredients": (
            "- 2 ovos mexidos\n"
            "- 2 fatias de pão integral\n"
            "- 1 banana\n"
            "- 1 col. sopa de pasta de amendoim\n"
            "- 1 xícara de café com leite desnatado"
        ),
        "instructions": (
            "Preparar os ovos mexidos com pouco óleo. Torrar o pão integral. "
            "Amassar a banana e misturar com pasta de amendoim para passar no pão."
        ),
        "order_index": 0
    },
    {
        "meal_type": "snack",
        "name": "Lanche da Manhã",
        "description": "Snack proteico e energético",
        "shares": {"calories": 0.10, "protein": 0.15, "carbs": 0.10, "fats": 0.10},
        "ingredients": (
            "- 1 iogurte grego natural\n"
            "- 30g de granola\n"
            "- Frutas vermelhas a gosto"
        ),
        "instructions": "Misturar todos os ingredientes em uma tigela.",
        "order_index": 1
    },
    {
        "meal_type": "lunch",
        "name": "Almoço Balanceado",
        "description": "Refeição principal com todos os macronutrientes",
        "shares": {"calories": 0.35, "protein": 0.35, "carbs": 0.35, "fats": 0.30},
        "ingredients": (
            "- 150g de peito de frango grelhado\n"
            "- 4 col. sopa de arroz integral\n"
            "- 3 col. sopa de feijão\n"
            "- Salada verde à vontade\n"
            "- 1 col. sopa de azeite"
        ),
        "instructions": (
            "Grelhar o frango temperado com ervas. Cozinhar arroz e feijão normalmente. "
            "Preparar salada fresca e temperar com azeite e limão."
        ),
        "order_index": 2
    },
    {
        "meal_type": "snack",
        "name": "Lanche da Tarde",
        "description": "Snack pré-treino ou entre refeições",
        "shares": {"calories": 0.10, "protein": 0.10, "carbs": 0.15, "fats": 0.10},
        "ingredients": (
            "- 1 maçã\n"
            "- 30g de amêndoas\n"
            "- 1 fatia de queijo branco"
        ),
        "instructions": "Consumir os alimentos como snack rápido.",
        "order_index": 3
    },
    {
        "meal_type": "dinner",
        "name": "Jantar Leve",
        "description": "Refeição noturna nutritiva e de fácil digestão",
        "shares": {"calories": 0.20, "protein": 0.25, "carbs": 0.10, "fats": 0.25},
        "ingredients": (
            "- 120g de peixe (tilapia ou salmão)\n"
            "- Legumes assados (brócolis, cenoura, abobrinha)\n"
            "- Salada verde\n"
            "- 1 batata doce pequena"
        ),
        "instructions": (
            "Assar o peixe com limão e ervas. Assar os legumes no forno com um fio de azeite. "
            "Servir com salada fresca."
        ),
        "order_index": 4
    }
]

MEAL_PLAN_NAMES = {
    "lose_weight": "Plano de Emagrecimento",
    "gain_muscle": "Plano de Ganho de Massa"
}
DEFAULT_MEAL_PLAN_NAME = "Plano Balanceado"

# (dia da semana, exercício, séries, repetições, descanso em segundos, observações, ordem)
WORKOUT_TEMPLATES = {
    "lose_weight": {
        "name": "Plano de Emagrecimento",
        "description": "Treino focado em queima de gordura com exercícios cardiovasculares e resistência",
        "exercises": [
            (1, "Corrida na Esteira", 1, "30 min", 60, "Manter ritmo moderado", 0),
            (1, "Agachamento Livre", 4, "15-20", 60, "Foco na técnica", 1),
            (1, "Flexão de Braço", 3, "12-15", 45, None, 2),
            (1, "Prancha Abdominal", 3, "45 seg", 30, None, 3),
            (3, "Bicicleta Ergométrica", 1, "40 min", 60, "Intensidade variável", 0),
            (3, "Leg Press", 4, "15-20", 60, None, 1),
            (3, "Remada Sentada", 3, "12-15", 45, None, 2),
            (3, "Burpees", 3, "10-12", 60, "Exercício completo", 3),
            (5, "Elíptico", 1, "35 min", 60, None, 0),
            (5, "Afundo Alternado", 3, "12-15 cada", 60, None, 1),
            (5, "Supino Reto", 3, "12-15", 60, None, 2),
            (5, "Mountain Climbers", 3, "30 seg", 45, "Alta intensidade", 3),
        ]
    },
    "gain_muscle": {
        "name": "Plano de Hipertrofia",
        "description": "Treino focado em ganho de massa muscular com cargas progressivas",
        "exercises": [
            (1, "Supino Reto", 4, "8-12", 90, "Carga progressiva", 0),
            (1, "Supino Inclinado", 3, "10-12", 75, None, 1),
            (1, "Crucifixo", 3, "12-15", 60, "Alongar bem o músculo", 2),
            (1, "Tríceps Pulley", 3, "12-15", 60, None, 3),
            (2, "Agachamento Livre", 4, "8-12", 120, "Exercício principal", 0),
            (2, "Leg Press 45°", 4, "10-12", 90, None, 1),
            (2, "Cadeira Extensora", 3, "12-15", 60, None, 2),
            (2, "Mesa Flexora", 3, "12-15", 60, None, 3),
            (4, "Barra Fixa", 4, "8-12", 90, "Use auxílio se necessário", 0),
            (4, "Remada Curvada", 4, "10-12", 75, None, 1),
            (4, "Puxada Frontal", 3, "12-15", 60, None, 2),
            (4, "Rosca Direta", 3, "12-15", 60, None, 3),
            (5, "Desenvolvimento Militar", 4, "8-12", 90, None, 0),
            (5, "Elevação Lateral", 3, "12-15", 60, None, 1),
            (5, "Elevação Frontal", 3, "12-15", 60, None, 2),
            (5, "Encolhimento", 3, "15-20", 60, None, 3),
        ]
    },
    "maintain": {
        "name": "Plano de Manutenção",
        "description": "Treino balanceado para manter a forma física atual",
        "exercises": [
            (1, "Supino Reto", 3, "10-12", 75, None, 0),
            (1, "Desenvolvimento", 3, "10-12", 75, None, 1),
            (1, "Tríceps Testa", 3, "12-15", 60, None, 2),
            (1, "Abdominal Crunch", 3, "15-20", 45, None, 3),
            (3, "Agachamento", 3, "12-15", 90, None, 0),
            (3, "Leg Press", 3, "12-15", 75, None, 1),
            (3, "Stiff", 3, "12-15", 60, None, 2),
            (3, "Panturrilha", 3, "15-20", 45, None, 3),
            (5, "Remada Curvada", 3, "10-12", 75, None, 0),
            (5, "Puxada Frontal", 3, "10-12", 75, None, 1),
            (5, "Rosca Direta", 3, "12-15", 60, None, 2),
            (5, "Prancha", 3, "45 seg", 45, None, 3),
        ]
    },
    "improve_endurance": {
        "name": "Plano de Resistência",
        "description": "Treino focado em melhorar capacidade cardiovascular e resistência muscular",
        "exercises": [
            (1, "Corrida Intervalada", 1, "35 min", 60, "Alternar intensidade a cada 3 min", 0),
            (1, "Agachamento com Salto", 4, "15-20", 60, None, 1),
            (1, "Flexão de Braço", 4, "15-20", 45, None, 2),
            (1, "Abdominal Bicicleta", 3, "20-25", 30, None, 3),
            (2, "Natação", 1, "45 min", 60, "Diversos estilos", 0),
            (3, "Bicicleta (HIIT)", 1, "30 min", 60, "Alta intensidade intervalada", 0),
            (3, "Leg Press", 4, "20-25", 60, "Carga moderada", 1),
            (3, "Remada", 4, "20-25", 60, None, 2),
            (3, "Burpees", 4, "15-20", 60, None, 3),
            (5, "Circuito Funcional", 4, "12 min", 120, "Múltiplos exercícios sem pausa", 0),
            (5, "Box Jump", 4, "15-20", 60, "Aterrissar suave", 1),
            (5, "Kettlebell Swing", 4, "20-25", 60, None, 2),
            (5, "Prancha Lateral", 3, "45 seg cada", 45, None, 3),
        ]
    }
}
DEFAULT_WORKOUT_GOAL = "maintain"
