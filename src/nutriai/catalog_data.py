"""Bundled food catalog."""

from nutriai.domain.nutrition import FoodItem, NutritionInfo

FOODS: tuple[FoodItem, ...] = (
    FoodItem(
        id="apple",
        name="Apple",
        localized_name="Elma",
        portion="1 medium (182g)",
        nutrition=NutritionInfo(calories=95, protein=0.5, carbs=25, fat=0.3, fiber=4.4),
        category="Fruits",
    ),
    FoodItem(
        id="banana",
        name="Banana",
        localized_name="Muz",
        portion="1 medium (118g)",
        nutrition=NutritionInfo(
            calories=105, protein=1.3, carbs=27, fat=0.4, fiber=3.1
        ),
        category="Fruits",
    ),
    FoodItem(
        id="boiled-egg",
        name="Boiled Egg",
        localized_name="Haşlanmış Yumurta",
        portion="1 large (50g)",
        nutrition=NutritionInfo(calories=78, protein=6.3, carbs=0.6, fat=5.3),
        category="Protein",
    ),
    FoodItem(
        id="chicken-breast",
        name="Grilled Chicken Breast",
        localized_name="Izgara Tavuk Göğsü",
        portion="100g",
        nutrition=NutritionInfo(calories=165, protein=31, carbs=0, fat=3.6),
        category="Protein",
    ),
    FoodItem(
        id="white-rice",
        name="White Rice",
        localized_name="Pirinç Pilavı",
        portion="1 cup cooked (158g)",
        nutrition=NutritionInfo(
            calories=205, protein=4.3, carbs=45, fat=0.4, fiber=0.6
        ),
        category="Grains",
    ),
    FoodItem(
        id="lentil-soup",
        name="Lentil Soup",
        localized_name="Mercimek Çorbası",
        portion="1 bowl (250ml)",
        nutrition=NutritionInfo(calories=180, protein=11, carbs=30, fat=2.5, fiber=8),
        category="Soups",
    ),
    FoodItem(
        id="greek-yogurt",
        name="Greek Yogurt",
        localized_name="Süzme Yoğurt",
        portion="1 cup (200g)",
        nutrition=NutritionInfo(calories=146, protein=20, carbs=8, fat=4),
        category="Dairy",
    ),
    FoodItem(
        id="whole-wheat-bread",
        name="Whole Wheat Bread",
        localized_name="Tam Buğday Ekmeği",
        portion="1 slice (32g)",
        nutrition=NutritionInfo(calories=81, protein=4, carbs=13.8, fat=1.1, fiber=1.9),
        category="Grains",
    ),
    FoodItem(
        id="almonds",
        name="Almonds",
        localized_name="Badem",
        portion="1 oz (28g)",
        nutrition=NutritionInfo(
            calories=164, protein=6, carbs=6.1, fat=14.2, fiber=3.5
        ),
        category="Nuts",
    ),
    FoodItem(
        id="salmon",
        name="Baked Salmon",
        localized_name="Fırında Somon",
        portion="100g",
        nutrition=NutritionInfo(calories=206, protein=22, carbs=0, fat=12.4),
        category="Protein",
    ),
    FoodItem(
        id="shepherd-salad",
        name="Shepherd Salad",
        localized_name="Çoban Salatası",
        portion="1 bowl (150g)",
        nutrition=NutritionInfo(calories=70, protein=1.5, carbs=8, fat=4, fiber=2.2),
        category="Vegetables",
    ),
    FoodItem(
        id="oatmeal",
        name="Oatmeal",
        localized_name="Yulaf Ezmesi",
        portion="1 cup cooked (234g)",
        nutrition=NutritionInfo(calories=166, protein=5.9, carbs=28, fat=3.6, fiber=4),
        category="Grains",
    ),
)
