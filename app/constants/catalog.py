"""Grocery catalogs used by the seeding scripts."""

BASIC_CATALOG = [
    # Fresh Produce
    {"name": "Organic Bananas (1 lb)", "price": 1.99, "stockQuantity": 150},
    {"name": "Avocados (3 pack)", "price": 4.99, "stockQuantity": 85},
    {"name": "Fresh Strawberries (1 lb)", "price": 5.99, "stockQuantity": 0},
    {"name": "Organic Spinach (5 oz)", "price": 3.49, "stockQuantity": 45},
    {"name": "Roma Tomatoes (1 lb)", "price": 2.79, "stockQuantity": 120},
    # Dairy & Eggs
    {"name": "Organic Whole Milk (1 gal)", "price": 4.49, "stockQuantity": 75},
    {"name": "Free Range Eggs (12 ct)", "price": 3.99, "stockQuantity": 90},
    {"name": "Greek Yogurt Plain (32 oz)", "price": 5.99, "stockQuantity": 60},
    {"name": "Sharp Cheddar Cheese (8 oz)", "price": 4.79, "stockQuantity": 8},
    {"name": "Butter Unsalted (1 lb)", "price": 5.49, "stockQuantity": 55},
    # Meat & Seafood
    {"name": "Chicken Breast (1 lb)", "price": 7.99, "stockQuantity": 40},
    {"name": "Ground Beef 85/15 (1 lb)", "price": 6.49, "stockQuantity": 35},
    {"name": "Atlantic Salmon (1 lb)", "price": 12.99, "stockQuantity": 2},
    {"name": "Pork Tenderloin (1 lb)", "price": 8.99, "stockQuantity": 25},
    # Pantry Staples
    {"name": "Pasta Spaghetti (1 lb)", "price": 1.29, "stockQuantity": 200},
    {"name": "Rice Jasmine (2 lb)", "price": 3.99, "stockQuantity": 100},
    {"name": "Olive Oil Extra Virgin (500ml)", "price": 8.99, "stockQuantity": 45},
    {"name": "Sea Salt (26 oz)", "price": 2.49, "stockQuantity": 80},
    {"name": "Black Pepper Ground (2 oz)", "price": 3.29, "stockQuantity": 65},
    # Bakery
    {"name": "Sourdough Bread Loaf", "price": 4.99, "stockQuantity": 30},
    {"name": "Croissants (6 pack)", "price": 6.99, "stockQuantity": 12},
    {"name": "Bagels Everything (6 pack)", "price": 4.49, "stockQuantity": 25},
    # Beverages
    {"name": "Orange Juice (64 oz)", "price": 4.99, "stockQuantity": 70},
    {"name": "Coffee Beans Colombian (12 oz)", "price": 12.99, "stockQuantity": 7},
    {"name": "Green Tea Bags (20 ct)", "price": 5.99, "stockQuantity": 50},
    # Frozen Foods
    {"name": "Frozen Blueberries (1 lb)", "price": 6.99, "stockQuantity": 40},
    {"name": "Ice Cream Vanilla (1.5 qt)", "price": 5.99, "stockQuantity": 0},
    {"name": "Frozen Pizza Margherita", "price": 7.99, "stockQuantity": 35},
    # Snacks & Treats
    {"name": "Dark Chocolate Bar (3.5 oz)", "price": 4.99, "stockQuantity": 90},
    {"name": "Mixed Nuts (1 lb)", "price": 9.99, "stockQuantity": 55},
]

ADVANCED_CATALOG = [
    {"name": "Organic Bananas (2 lbs)", "price": 2.99, "stockQuantity": 150, "category": "Produce"},
    {"name": "Hass Avocados (4 pack)", "price": 5.99, "stockQuantity": 85, "category": "Produce"},
    {"name": "Fresh Strawberries (1 lb)", "price": 6.99, "stockQuantity": 0, "category": "Produce"},
    {"name": "Organic Baby Spinach (5 oz)", "price": 3.99, "stockQuantity": 45, "category": "Produce"},
    {"name": "Roma Tomatoes (2 lbs)", "price": 4.49, "stockQuantity": 120, "category": "Produce"},
    {"name": "Sweet Bell Peppers (3 pack)", "price": 4.99, "stockQuantity": 65, "category": "Produce"},
    {"name": "Organic Carrots (2 lbs)", "price": 2.79, "stockQuantity": 95, "category": "Produce"},
    {"name": "Organic Whole Milk (1 gal)", "price": 4.99, "stockQuantity": 75, "category": "Dairy"},
    {"name": "Free Range Large Eggs (12 ct)", "price": 4.49, "stockQuantity": 90, "category": "Dairy"},
    {"name": "Greek Yogurt Vanilla (32 oz)", "price": 6.99, "stockQuantity": 60, "category": "Dairy"},
    {"name": "Sharp Cheddar Cheese (8 oz)", "price": 5.49, "stockQuantity": 8, "category": "Dairy"},
    {"name": "Unsalted Butter (1 lb)", "price": 6.49, "stockQuantity": 55, "category": "Dairy"},
    {"name": "Cream Cheese (8 oz)", "price": 3.99, "stockQuantity": 40, "category": "Dairy"},
    {"name": "Boneless Chicken Breast (1 lb)", "price": 8.99, "stockQuantity": 40, "category": "Meat"},
    {"name": "Ground Beef 85/15 (1 lb)", "price": 7.49, "stockQuantity": 35, "category": "Meat"},
    {"name": "Fresh Atlantic Salmon (1 lb)", "price": 14.99, "stockQuantity": 2, "category": "Seafood"},
    {"name": "Pork Tenderloin (1 lb)", "price": 9.99, "stockQuantity": 25, "category": "Meat"},
    {"name": "Turkey Deli Slices (1 lb)", "price": 8.49, "stockQuantity": 30, "category": "Deli"},
    {"name": "Spaghetti Pasta (1 lb)", "price": 1.49, "stockQuantity": 200, "category": "Pantry"},
    {"name": "Jasmine Rice (5 lbs)", "price": 7.99, "stockQuantity": 100, "category": "Pantry"},
    {"name": "Extra Virgin Olive Oil (500ml)", "price": 12.99, "stockQuantity": 45, "category": "Pantry"},
    {"name": "Sea Salt Fine (26 oz)", "price": 2.99, "stockQuantity": 80, "category": "Pantry"},
    {"name": "Ground Black Pepper (2.5 oz)", "price": 4.29, "stockQuantity": 65, "category": "Pantry"},
    {"name": "Canned Tomatoes Crushed (28 oz)", "price": 2.49, "stockQuantity": 120, "category": "Pantry"},
    {"name": "Artisan Sourdough Loaf", "price": 5.99, "stockQuantity": 30, "category": "Bakery"},
    {"name": "Butter Croissants (6 pack)", "price": 7.99, "stockQuantity": 12, "category": "Bakery"},
    {"name": "Everything Bagels (6 pack)", "price": 4.99, "stockQuantity": 25, "category": "Bakery"},
    {"name": "Whole Wheat Sandwich Bread", "price": 3.49, "stockQuantity": 50, "category": "Bakery"},
    {"name": "Fresh Orange Juice (64 oz)", "price": 5.99, "stockQuantity": 70, "category": "Beverages"},
    {"name": "Colombian Coffee Beans (12 oz)", "price": 14.99, "stockQuantity": 7, "category": "Beverages"},
    {"name": "Organic Green Tea (20 bags)", "price": 6.99, "stockQuantity": 50, "category": "Beverages"},
    {"name": "Sparkling Water (12 pack)", "price": 4.99, "stockQuantity": 85, "category": "Beverages"},
    {"name": "Organic Frozen Blueberries (1 lb)", "price": 7.99, "stockQuantity": 40, "category": "Frozen"},
    {"name": "Premium Vanilla Ice Cream (1.5 qt)", "price": 6.99, "stockQuantity": 0, "category": "Frozen"},
    {"name": "Wood-Fired Pizza Margherita", "price": 8.99, "stockQuantity": 35, "category": "Frozen"},
    {"name": "Frozen Mixed Vegetables (1 lb)", "price": 3.99, "stockQuantity": 75, "category": "Frozen"},
    {"name": "Dark Chocolate 70% (3.5 oz)", "price": 5.99, "stockQuantity": 90, "category": "Snacks"},
    {"name": "Roasted Mixed Nuts (1 lb)", "price": 11.99, "stockQuantity": 55, "category": "Snacks"},
    {"name": "Organic Granola (12 oz)", "price": 7.49, "stockQuantity": 40, "category": "Snacks"},
    {"name": "Organic Honey (12 oz)", "price": 8.99, "stockQuantity": 35, "category": "Health"},
    {"name": "Coconut Oil Virgin (14 oz)", "price": 9.99, "stockQuantity": 25, "category": "Health"},
]
