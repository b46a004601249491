"""Initial catalogue and site content loaded into an empty database."""
import uuid

ALPHONSO_CATEGORY_ID = uuid.UUID("00000000-0000-0000-0000-000000000001")
JAGGERY_CATEGORY_ID = uuid.UUID("00000000-0000-0000-0000-000000000002")
OIL_CATEGORY_ID = uuid.UUID("00000000-0000-0000-0000-000000000003")


def product_id(n: int) -> uuid.UUID:
    return uuid.UUID(f"10000000-0000-0000-0000-{n:012d}")


CATEGORIES = [
    {
        "id": ALPHONSO_CATEGORY_ID,
        "name": "Alphonso Mangoes",
        "slug": "alphonso",
        "description": "Fresh, premium quality Alphonso mangoes - the king of mangoes. Sweet, juicy, and aromatic.",
        "icon": "🥭",
        "display_order": 1,
    },
    {
        "id": JAGGERY_CATEGORY_ID,
        "name": "Jaggery Products",
        "slug": "jaggery",
        "description": "Pure, organic jaggery products made from sugarcane using traditional methods.",
        "icon": "🍯",
        "display_order": 2,
    },
    {
        "id": OIL_CATEGORY_ID,
        "name": "Cold Pressed Oils",
        "slug": "oil",
        "description": "Pure, unrefined oils extracted using traditional cold-pressing methods. No chemicals, retains natural nutrients.",
        "icon": "🛢️",
        "display_order": 3,
    },
]

# variants: (size, unit, price, stock)
PRODUCTS = [
    {
        "id": product_id(1),
        "name": "Premium Alphonso Mangoes",
        "slug": "premium-alphonso-mangoes",
        "full_description": "Fresh, premium quality Alphonso mangoes - the king of mangoes. Sweet, juicy, and aromatic.",
        "short_description": "The king of mangoes with exceptional sweetness",
        "category_id": ALPHONSO_CATEGORY_ID,
        "is_featured": True,
        "display_order": 1,
        "season": ("March", "May"),
        "variants": [("2 dozen", "dozen", 1600, 100)],
        "features": ["GI Tagged Authentic", "Hand-picked Premium", "Perfectly Ripened", "Natural Sweetness"],
    },
    {
        "id": product_id(2),
        "name": "Sun Product - Premium Alphonso Mangoes",
        "slug": "sun-premium-alphonso-mangoes",
        "full_description": "Premium sun-ripened Alphonso mangoes with exceptional sweetness and flavor. Perfect for gifting and special occasions.",
        "short_description": "Premium sun-ripened mangoes for special occasions",
        "category_id": ALPHONSO_CATEGORY_ID,
        "is_featured": False,
        "display_order": 2,
        "season": ("March", "May"),
        "variants": [("5 dozen", "dozen", 4000, 50)],
        "features": ["Sun-Ripened Naturally", "Premium Selection", "Gift Quality"],
    },
    {
        "id": product_id(3),
        "name": "Organic Jaggery (Block)",
        "slug": "organic-jaggery-block",
        "full_description": "Traditional pure organic jaggery blocks (kolhapuri gul/gud) made from sugarcane. Natural sweetener with rich minerals.",
        "short_description": "Traditional kolhapuri jaggery blocks",
        "category_id": JAGGERY_CATEGORY_ID,
        "is_featured": True,
        "display_order": 1,
        "variants": [("1 kg", "kg", 80, 500)],
        "features": ["100% Organic", "Traditional Processing", "Rich in Minerals", "No Artificial Additives"],
    },
    {
        "id": product_id(4),
        "name": "Organic Jaggery (Powder)",
        "slug": "organic-jaggery-powder",
        "full_description": "Fine organic jaggery powder for easy cooking and baking. Perfect for tea, desserts and daily use.",
        "short_description": "Fine jaggery powder for cooking and baking",
        "category_id": JAGGERY_CATEGORY_ID,
        "is_featured": False,
        "display_order": 2,
        "variants": [("500 g", "g", 150, 300), ("1 kg", "kg", 280, 200)],
        "features": ["Easy to Use", "Perfect for Tea", "Baking Friendly"],
    },
    {
        "id": product_id(5),
        "name": "Cold Pressed Sunflower Oil",
        "slug": "cold-pressed-sunflower-oil",
        "full_description": "Pure cold-pressed sunflower oil. Rich in Vitamin E and perfect for cooking.",
        "short_description": "Rich in Vitamin E, perfect for daily cooking",
        "category_id": OIL_CATEGORY_ID,
        "is_featured": True,
        "display_order": 1,
        "variants": [("1 L", "L", 320, 150), ("2 L", "L", 620, 100), ("5 L", "L", 1500, 50)],
        "features": ["Traditional Cold-Pressed", "No Chemical Processing", "Retains Natural Nutrients", "Rich in Vitamin E"],
    },
    {
        "id": product_id(6),
        "name": "Cold Pressed Groundnut Oil",
        "slug": "cold-pressed-groundnut-oil",
        "full_description": "Pure cold-pressed groundnut (peanut) oil. Traditional method of extraction preserves nutrients.",
        "short_description": "Traditional groundnut oil with rich flavor",
        "category_id": OIL_CATEGORY_ID,
        "is_featured": False,
        "display_order": 2,
        "variants": [("1 L", "L", 380, 150), ("2 L", "L", 740, 100), ("5 L", "L", 1800, 50)],
        "features": ["Pure Groundnut", "Traditional Method", "Rich Aroma"],
    },
    {
        "id": product_id(7),
        "name": "Cold Pressed Sesame Oil",
        "slug": "cold-pressed-sesame-oil",
        "full_description": "Pure cold-pressed sesame oil. Perfect for cooking and ayurvedic treatments.",
        "short_description": "Pure sesame oil for cooking and wellness",
        "category_id": OIL_CATEGORY_ID,
        "is_featured": False,
        "display_order": 3,
        "variants": [("200 ml", "ml", 120, 200), ("500 ml", "ml", 250, 150), ("1 L", "L", 480, 100)],
        "features": ["Ayurvedic Quality", "Multi-purpose", "Heart Healthy"],
    },
    {
        "id": product_id(8),
        "name": "Cold Pressed Almond Oil",
        "slug": "cold-pressed-almond-oil",
        "full_description": "Premium cold-pressed almond oil. Perfect for baby care and skin care.",
        "short_description": "Premium almond oil for baby and skin care",
        "category_id": OIL_CATEGORY_ID,
        "is_featured": False,
        "display_order": 4,
        "variants": [("50 ml", "ml", 300, 200), ("100 ml", "ml", 600, 150), ("200 ml", "ml", 600, 100), ("500 ml", "ml", 800, 50)],
        "features": ["Baby Safe", "Skin Nourishing", "Premium Quality"],
    },
    {
        "id": product_id(9),
        "name": "Cold Pressed Mustard Oil",
        "slug": "cold-pressed-mustard-oil",
        "full_description": "Pure cold-pressed mustard oil. Traditional cooking oil with strong flavor, perfect for Indian cuisine.",
        "short_description": "Traditional mustard oil for authentic Indian cooking",
        "category_id": OIL_CATEGORY_ID,
        "is_featured": False,
        "display_order": 5,
        "variants": [("500 ml", "ml", 180, 200), ("1 L", "L", 340, 150), ("2 L", "L", 660, 100), ("5 L", "L", 1600, 50)],
        "features": ["Authentic Flavor", "Traditional Extraction", "Perfect for Pickles"],
    },
    {
        "id": product_id(10),
        "name": "Cold Pressed Coconut Oil",
        "slug": "cold-pressed-coconut-oil",
        "full_description": "Premium cold-pressed virgin coconut oil. Perfect for cooking, hair care, and skin care.",
        "short_description": "Multi-purpose virgin coconut oil",
        "category_id": OIL_CATEGORY_ID,
        "is_featured": False,
        "display_order": 6,
        "variants": [("200 ml", "ml", 220, 200), ("500 ml", "ml", 480, 150), ("1 L", "L", 920, 100), ("2 L", "L", 1800, 50)],
        "features": ["Virgin Quality", "Multi-purpose", "Hair & Skin Care", "Cooking Friendly"],
    },
]

# (customer name, title, content)
TESTIMONIALS = [
    ("Priya Sharma", "Mumbai Resident",
     "The mangoes were unbelievably fresh and sweet! You can taste the authentic Ratnagiri flavor in every bite. "
     "Best Alphonso mangoes I've had outside of Maharashtra."),
    ("Ramesh Kumar", "Bangalore Food Lover",
     "I've been using their cold-pressed oils for 6 months now. The groundnut oil has completely transformed my "
     "cooking. You can actually taste the difference!"),
    ("Neha Joshi", "Pune Homemaker",
     "Finally found organic jaggery that tastes exactly like what my grandmother used to make! Perfect for making "
     "traditional sweets and chai."),
    ("Arjun Patel", "Delhi Chef",
     "As a professional chef, I'm very particular about ingredient quality. AtYourDoorStep's products have become "
     "a staple in my kitchen. Highly recommended!"),
    ("Kavitha Reddy", "Hyderabad Health Enthusiast",
     "Switched to their cold-pressed oils after learning about the health benefits. The sesame oil is pure gold! "
     "My family has noticed the difference in taste and health."),
    ("Vikram Singh", "Gurgaon Executive",
     "Ordered mangoes for a family gathering and everyone was amazed! The packaging was excellent and delivery was "
     "right on time. Will definitely order again."),
]

# (key, value, description)
SITE_SETTINGS = [
    ("contact.phone", "+91-8237381312", "Phone Number"),
    ("contact.email", "yashturmbekar7@gmail.com", "Email Address"),
    ("contact.address", "Pune, Maharashtra, India", "Address"),
    ("contact.business_hours", "Mon-Sat, 9AM-7PM", "Business Hours"),
    ("social.facebook", "https://www.facebook.com/profile.php?id=100074808451374", "Facebook URL"),
    ("social.instagram", "https://www.instagram.com/gopro.baba/", "Instagram URL"),
    ("social.twitter", "https://x.com/goprobaba", "Twitter URL"),
    ("social.linkedin", "https://www.linkedin.com/in/yashturmbekar", "LinkedIn URL"),
    ("general.site_name", "AtYourDoorStep", "Site Name"),
    ("general.tagline", "Quality You Can Trust, Delivered", "Tagline"),
    ("general.description",
     "AtYourDoorStep is a proudly Indian, family-run business bringing the essence of purity, tradition, and "
     "quality directly to your home.", "Site Description"),
    ("seo.home_title", "AtYourDoorStep - Premium Organic Products Delivered", "Home Page Title"),
    ("seo.home_description",
     "Shop premium Alphonso mangoes, organic jaggery, and cold-pressed oils. Direct from farms to your doorstep.",
     "Home Page Description"),
    ("seo.home_keywords", "alphonso mangoes, organic jaggery, cold pressed oil, natural products, farm fresh",
     "Home Page Keywords"),
]

HERO_SLIDES = [
    {
        "image": "alphonso",
        "product_id": product_id(1),
        "title": "Alphonso Mangoes",
        "description": "Experience the king of mangoes - authentic Ratnagiri Alphonso mangoes with unmatched sweetness and aroma.",
        "highlight_text": "KING OF MANGOES",
        "cta_link": "/products/alphonso",
        "gradient": ("#FF6B35", "#FFAA00", "#FFE135"),
        "features": ["Authentic Ratnagiri Origin", "Peak Ripeness", "Rich Aroma & Taste", "Limited Season Availability"],
    },
    {
        "image": "oil",
        "product_id": product_id(5),
        "title": "Cold-Pressed Oils",
        "description": "Pure, unrefined oils extracted in our cold-pressing facility using traditional methods. "
                       "Available in coconut, sesame, groundnut, and mustard varieties.",
        "highlight_text": "100% PURE & NATURAL",
        "cta_link": "/products/oil",
        "gradient": ("#228B22", "#32CD32", "#90EE90"),
        "features": ["Traditional Extraction", "No Chemical Processing", "Rich in Nutrients", "Multiple Varieties"],
    },
    {
        "image": "jaggery",
        "product_id": product_id(3),
        "title": "Organic Jaggery",
        "description": "Pure, organic jaggery made from sugarcane in our processing facility using traditional methods. "
                       "Rich in minerals and free from chemicals and artificial additives.",
        "highlight_text": "CHEMICAL-FREE SWEETNESS",
        "cta_link": "/products/jaggery",
        "gradient": ("#8B4513", "#CD853F", "#DEB887"),
        "features": ["Organic Sugarcane", "No Chemicals Added", "Rich in Minerals", "Traditional Process"],
    },
]

# (label, value, section, display order)
STATISTICS = [
    ("Happy Customers", "5K+", "hero", 1),
    ("Direct from Farms", "Fresh", "hero", 2),
    ("Natural & Pure", "100%", "hero", 3),
    ("Years of Experience", "30+", "about", 1),
    ("Chemical Free", "100%", "about", 2),
    ("Premium Products", "3", "about", 3),
    ("Happy Customers", "1000+", "about", 4),
    ("Pure & Natural", "100%", "why_choose_us", 1),
    ("From Source", "Direct", "why_choose_us", 2),
    ("Delivery", "Pan-India", "why_choose_us", 3),
    ("Years Experience", "3+", "why_choose_us", 4),
]

# (title, description, icon)
USP_ITEMS = [
    ("Premium Organic Products",
     "Certified organic mangoes, cold-pressed oils, and traditional organic Kolhapuri jaggery. Zero chemicals, "
     "zero compromise - just nature's purest goodness.", "organic"),
    ("Vertically Integrated Operations",
     "We own our orchards, processing facilities, and distribution network. Complete control ensures consistent "
     "quality and freshness.", "integrated"),
    ("Nationwide Express Delivery",
     "Fast and reliable delivery service with careful packaging ensures your fresh organic products reach you "
     "safely anywhere in India.", "delivery"),
    ("Harvest-to-Home Promise",
     "Our mangoes are picked fresh and sent directly to you. They ripen naturally in front of you - no artificial "
     "ripening, just nature's perfect timing.", "harvest"),
    ("100% Satisfaction Guarantee",
     "Not happy with your order? We offer hassle-free returns and full refunds. Your satisfaction is our top "
     "priority.", "satisfaction"),
    ("Generational Farming Wisdom",
     "Three generations of sustainable farming practices and traditional processing methods create products with "
     "authentic taste and nutrition.", "wisdom"),
]

# items: (title, description)
COMPANY_STORY = [
    {
        "section_key": "our_story",
        "title": "Our Story",
        "icon": "📖",
        "items": [
            (None, "We began over 30 years ago with a small, traditional jaggery unit near sugarcane fields - built "
                   "on values of purity, tradition, and hard work."),
            (None, "At the heart of this growth lies a simple yet powerful mission: To bring honest, chemical-free, "
                   "and high-quality products into Indian households, while making the process as easy and "
                   "accessible as possible."),
            (None, "Today, AtYourDoorstep is more than just a brand - it's a promise of purity with convenience, "
                   "rooted in Indian traditions and powered by modern delivery."),
        ],
    },
    {
        "section_key": "our_spaces",
        "title": "Our Spaces",
        "icon": "🏭",
        "items": [
            ("Our Mango Orchards:", "Located in Ratnagiri, thriving on red laterite soil and clean air, producing "
                                    "premium Alphonso mangoes."),
            ("Our Jaggery Warehouse:", "Built near sugarcane farms, where juice is boiled in iron pans over "
                                       "firewood, the traditional way."),
            ("Our Cold-Pressing Unit:", "Operates in a controlled hygienic environment, where quality seeds are "
                                        "cold-pressed without heat or chemicals."),
        ],
    },
    {
        "section_key": "our_products",
        "title": "Our Products",
        "icon": "🌱",
        "items": [
            ("Jaggery:", "With over 30 years in the industry, our jaggery is made using age-old methods in our own "
                         "processing facility - rich in minerals, free from chemicals."),
            ("Cold-Pressed Oils:", "Since 2021, we've been extracting unrefined oils (coconut, sesame, groundnut, "
                                   "mustard) using the traditional wooden ghani method in our cold-pressing "
                                   "facility - keeping nutrients intact."),
            ("Mangoes:", "For the past 4 years, we've been delivering carbide-free, naturally ripened Alphonso "
                         "mangoes from our own orchards in Ratnagiri."),
        ],
    },
]

INQUIRY_TYPES = [
    "Product Information",
    "Place an Order",
    "Bulk Orders",
    "Corporate Gifts",
    "Seasonal Offers",
    "Delivery Questions",
    "Customer Support",
    "Other",
]

DELIVERY_SETTINGS = {
    "free_delivery_threshold": 1000,
    "standard_delivery_charge": 50,
    "express_delivery_charge": 100,
    "is_delivery_enabled": True,
    "delivery_note": "Free delivery on orders above ₹1000",
}
