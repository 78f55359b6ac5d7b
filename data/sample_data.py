"""Reference rows seeded into empty tables at startup.

Distances are miles x 10 and ratings are 0-50 (one implied decimal).
"""

SAMPLE_RECIPES = [
    {
        "name": "Spinach and Tomato Salad",
        "description": "Quick and healthy salad using your expiring spinach and tomatoes",
        "prep_time": 15,
        "image_url": "https://images.unsplash.com/photo-1505253758473-96b7015fcd40?auto=format&fit=crop&w=800&q=80",
        "ingredients": ["Spinach", "Tomatoes", "Eggs", "Olive oil", "Lemon juice", "Salt", "Pepper"],
        "instructions": (
            "1. Wash and dry spinach leaves.\n2. Slice tomatoes.\n"
            "3. Hard boil eggs, peel and slice.\n4. Combine all ingredients in a bowl.\n"
            "5. Drizzle with olive oil and lemon juice.\n6. Season with salt and pepper to taste."
        ),
        "rating": 48,
    },
    {
        "name": "Egg and Cheese Sandwich",
        "description": "Easy breakfast using your eggs, cheese and bread",
        "prep_time": 10,
        "image_url": "https://images.unsplash.com/photo-1511994714008-b6d68a8b32a2?auto=format&fit=crop&w=800&q=80",
        "ingredients": ["Eggs", "Cheese", "Bread", "Butter", "Salt", "Pepper"],
        "instructions": (
            "1. Fry eggs in a pan to your liking.\n2. Toast bread slices.\n"
            "3. Place cheese on one slice of toast.\n4. Add the fried egg on top of cheese.\n"
            "5. Season with salt and pepper.\n6. Top with the second slice of toast."
        ),
        "rating": 46,
    },
    {
        "name": "Apple Pie",
        "description": "Classic apple pie with a buttery crust",
        "prep_time": 30,
        "image_url": "https://images.unsplash.com/photo-1482049016688-2d3e1b311543?auto=format&fit=crop&w=400&q=80",
        "ingredients": ["Apples", "Flour", "Sugar", "Butter", "Cinnamon", "Nutmeg", "Salt"],
        "instructions": (
            "1. Preheat oven to 375F.\n2. Prepare pie crust.\n3. Peel and slice apples.\n"
            "4. Mix apples with sugar and spices.\n5. Fill pie crust with apple mixture.\n"
            "6. Add top crust and seal edges.\n7. Bake for 45-50 minutes until golden brown."
        ),
        "rating": 48,
    },
    {
        "name": "Avocado Toast",
        "description": "Simple and nutritious breakfast",
        "prep_time": 5,
        "image_url": "https://images.unsplash.com/photo-1548940740-204726a19be3?auto=format&fit=crop&w=400&q=80",
        "ingredients": ["Avocado", "Bread", "Lemon juice", "Salt", "Pepper", "Red pepper flakes"],
        "instructions": (
            "1. Toast bread slices.\n2. Mash ripe avocado in a bowl.\n"
            "3. Add lemon juice, salt, and pepper to taste.\n4. Spread avocado mixture on toast.\n"
            "5. Sprinkle with red pepper flakes if desired."
        ),
        "rating": 45,
    },
    {
        "name": "Vegetable Soup",
        "description": "Hearty soup with seasonal vegetables",
        "prep_time": 45,
        "image_url": "https://images.unsplash.com/photo-1555939594-58d7cb561ad1?auto=format&fit=crop&w=400&q=80",
        "ingredients": [
            "Carrots", "Celery", "Onion", "Potatoes", "Tomatoes",
            "Vegetable broth", "Garlic", "Herbs", "Salt", "Pepper",
        ],
        "instructions": (
            "1. Chop all vegetables.\n2. Saute onion and garlic until translucent.\n"
            "3. Add remaining vegetables and cook for 5 minutes.\n"
            "4. Pour in vegetable broth and bring to a boil.\n"
            "5. Reduce heat and simmer for 30 minutes.\n"
            "6. Season with herbs, salt, and pepper to taste."
        ),
        "rating": 46,
    },
    {
        "name": "Fruit Salad",
        "description": "Refreshing mix of seasonal fruits",
        "prep_time": 10,
        "image_url": "https://images.unsplash.com/photo-1563379926898-05f4575a45d8?auto=format&fit=crop&w=400&q=80",
        "ingredients": [
            "Apples", "Bananas", "Oranges", "Grapes", "Strawberries", "Honey", "Lemon juice",
        ],
        "instructions": (
            "1. Wash all fruits thoroughly.\n2. Peel and dice apples, bananas, and oranges.\n"
            "3. Slice strawberries and halve grapes if large.\n"
            "4. Combine all fruits in a large bowl.\n5. Drizzle with honey and lemon juice.\n"
            "6. Toss gently to coat."
        ),
        "rating": 49,
    },
]

SAMPLE_FOOD_BANKS = [
    {
        "name": "Community Food Bank",
        "distance": 12,
        "open_hours": "Open today until 6:00 PM",
        "description": "Accepting all non-perishable foods and fresh produce. Please check their website for specific needs.",
    },
    {
        "name": "Harvest Food Pantry",
        "distance": 25,
        "open_hours": "Open Tue-Sat, 9:00 AM - 5:00 PM",
        "description": "Currently in need of: fresh vegetables, canned goods, and baby food.",
    },
    {
        "name": "City Mission Outreach",
        "distance": 18,
        "open_hours": "Open daily 8:00 AM - 8:00 PM",
        "description": "Accepts donations of all kinds including fresh, frozen and packaged foods.",
    },
    {
        "name": "Neighborhood Food Assistance",
        "distance": 30,
        "open_hours": "Open Mon-Fri, 10:00 AM - 4:00 PM",
        "description": "Serving families in need. Currently seeking donations of rice, beans, and canned vegetables.",
    },
]

SAMPLE_NEARBY_USERS = [
    {
        "name": "Sarah J.",
        "distance": 5,
        "rating": 45,
        "image_url": "https://images.unsplash.com/photo-1494790108377-be9c29b29330?auto=format&fit=crop&w=100&q=80",
    },
    {
        "name": "Michael T.",
        "distance": 8,
        "rating": 40,
        "image_url": "https://images.unsplash.com/photo-1500648767791-00dcc994a43e?auto=format&fit=crop&w=100&q=80",
    },
    {
        "name": "Lisa K.",
        "distance": 12,
        "rating": 50,
        "image_url": "https://images.unsplash.com/photo-1544005313-94ddf0286df2?auto=format&fit=crop&w=100&q=80",
    },
    {
        "name": "Robert W.",
        "distance": 15,
        "rating": 35,
        "image_url": "https://images.unsplash.com/photo-1552058544-f2b08422138a?auto=format&fit=crop&w=100&q=80",
    },
]
