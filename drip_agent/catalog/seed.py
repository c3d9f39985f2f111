"""
Static catalog reference data: style archetypes and products.
"""

ARCHETYPES = [
    {
        "id": "techwear",
        "name": "Techwear",
        "description": "Functional, futuristic clothing with technical fabrics. Urban ninja aesthetic.",
        "keywords": ["tech", "functional", "futuristic", "minimal", "black", "urban", "ninja", "cyberpunk"],
        "color_palette": ["#000000", "#1a1a1a", "#333333", "#00ff00"],
        "example_brands": ["Acronym", "Arc'teryx Veilance", "Stone Island Shadow Project", "Y-3"],
    },
    {
        "id": "quiet-luxury",
        "name": "Quiet Luxury",
        "description": "Understated elegance. Quality over logos. The old money aesthetic.",
        "keywords": ["elegant", "understated", "quality", "timeless", "neutral", "sophisticated", "refined"],
        "color_palette": ["#f5f5dc", "#d4c5a9", "#8b7355", "#2f2f2f"],
        "example_brands": ["The Row", "Loro Piana", "Brunello Cucinelli", "Zegna"],
    },
    {
        "id": "streetwear",
        "name": "Streetwear",
        "description": "Bold, expressive, culture-driven. Sneakers, hoodies, statement pieces.",
        "keywords": ["bold", "expressive", "hype", "sneakers", "graphic", "urban", "culture", "drops"],
        "color_palette": ["#ff0000", "#000000", "#ffffff", "#ffd700"],
        "example_brands": ["Supreme", "Off-White", "A Bathing Ape", "Stüssy"],
    },
    {
        "id": "minimalist",
        "name": "Minimalist",
        "description": "Clean lines, neutral colors, capsule wardrobe mentality.",
        "keywords": ["clean", "simple", "neutral", "capsule", "essential", "modern", "scandinavian"],
        "color_palette": ["#ffffff", "#f0f0f0", "#000000", "#808080"],
        "example_brands": ["COS", "Everlane", "Uniqlo U", "Arket"],
    },
    {
        "id": "avant-garde",
        "name": "Avant-Garde",
        "description": "Experimental, artistic, boundary-pushing fashion as art.",
        "keywords": ["experimental", "artistic", "deconstructed", "asymmetric", "dramatic", "unique"],
        "color_palette": ["#000000", "#ffffff", "#8b0000", "#4a4a4a"],
        "example_brands": ["Rick Owens", "Comme des Garçons", "Yohji Yamamoto", "Maison Margiela"],
    },
    {
        "id": "classic-prep",
        "name": "Classic Prep",
        "description": "Timeless Ivy League style. Polo shirts, chinos, boat shoes.",
        "keywords": ["preppy", "classic", "ivy", "traditional", "collegiate", "nautical", "conservative"],
        "color_palette": ["#1e3a5f", "#ffffff", "#8b0000", "#f0e68c"],
        "example_brands": ["Ralph Lauren", "Brooks Brothers", "J.Crew", "Vineyard Vines"],
    },
    {
        "id": "athleisure",
        "name": "Athleisure",
        "description": "Performance meets lifestyle. Gym-to-street versatility.",
        "keywords": ["athletic", "comfortable", "sporty", "performance", "casual", "active"],
        "color_palette": ["#000000", "#ffffff", "#ff6b35", "#4ecdc4"],
        "example_brands": ["Lululemon", "Nike", "Alo Yoga", "Outdoor Voices"],
    },
]

_IMG = "https://images.unsplash.com/photo-{}?w=400"

PRODUCTS = [
    # Techwear
    {
        "id": "acronym-j1a",
        "name": "J1A-GTKP Jacket",
        "brand": "Acronym",
        "category": "Outerwear",
        "price": 1800,
        "style_archetypes": ["techwear", "avant-garde"],
        "gender": "male",
        "colors": ["black"],
        "weight": "medium",
        "description": "The iconic Acronym jacket. GORE-TEX Pro, modular design, urban armor.",
        "image_url": _IMG.format("1551028719-00167b16eac5"),
        "buy_link": "https://acrnm.com/",
    },
    {
        "id": "arcteryx-veilance-blazer",
        "name": "Veilance Indisce Blazer",
        "brand": "Arc'teryx Veilance",
        "category": "Outerwear",
        "price": 850,
        "style_archetypes": ["techwear", "minimalist", "quiet-luxury"],
        "gender": "male",
        "colors": ["charcoal", "black"],
        "weight": "medium",
        "description": "Technical tailoring. Stretch-woven, weather resistant, boardroom ready.",
        "image_url": _IMG.format("1507679799987-c73779587ccf"),
        "buy_link": "https://veilance.arcteryx.com/",
    },
    {
        "id": "nike-acg-cargo",
        "name": "ACG Cargo Pants",
        "brand": "Nike ACG",
        "category": "Bottoms",
        "price": 140,
        "style_archetypes": ["techwear", "streetwear", "athleisure"],
        "gender": "unisex",
        "colors": ["olive", "black"],
        "weight": "light",
        "description": "Trail-ready cargos with articulated knees and zip pockets.",
        "image_url": _IMG.format("1624378439575-d8705ad7ae80"),
        "buy_link": "https://www.nike.com/acg",
    },
    {
        "id": "y3-qasa-sneaker",
        "name": "Qasa High Sneaker",
        "brand": "Y-3",
        "category": "Footwear",
        "price": 350,
        "style_archetypes": ["techwear", "avant-garde"],
        "gender": "unisex",
        "colors": ["black", "white"],
        "weight": "medium",
        "description": "Sock-knit upper on a sculpted sole. Future-facing footwear.",
        "image_url": _IMG.format("1542291026-7eec264c27ff"),
        "buy_link": "https://www.y-3.com/",
    },
    {
        "id": "arcteryx-womens-shell",
        "name": "Women's Beta Shell",
        "brand": "Arc'teryx",
        "category": "Outerwear",
        "price": 450,
        "style_archetypes": ["techwear", "athleisure"],
        "gender": "female",
        "colors": ["sage", "black"],
        "weight": "light",
        "description": "Packable GORE-TEX shell cut for a streamlined silhouette.",
        "image_url": _IMG.format("1544022613-e87ca75a784a"),
        "buy_link": "https://arcteryx.com/",
    },
    # Quiet Luxury
    {
        "id": "loro-piana-cashmere-crew",
        "name": "Cashmere Crew Sweater",
        "brand": "Loro Piana",
        "category": "Tops",
        "price": 1350,
        "style_archetypes": ["quiet-luxury", "minimalist"],
        "gender": "male",
        "colors": ["camel", "oatmeal"],
        "weight": "medium",
        "description": "Baby cashmere knit in a relaxed crew. Logo-free, quietly perfect.",
        "image_url": _IMG.format("1620799140408-edc6dcb6d633"),
        "buy_link": "https://www.loropiana.com/",
    },
    {
        "id": "loro-piana-summer-walk",
        "name": "Summer Walk Loafers",
        "brand": "Loro Piana",
        "category": "Footwear",
        "price": 995,
        "style_archetypes": ["quiet-luxury", "classic-prep"],
        "gender": "unisex",
        "colors": ["taupe", "navy"],
        "weight": "light",
        "description": "Suede loafers so soft they feel like slippers.",
        "image_url": _IMG.format("1614252235316-8c857d38b5f4"),
        "buy_link": "https://www.loropiana.com/",
    },
    {
        "id": "the-row-silk-shirt",
        "name": "Big Sisea Silk Shirt",
        "brand": "The Row",
        "category": "Tops",
        "price": 1190,
        "style_archetypes": ["quiet-luxury", "minimalist"],
        "gender": "female",
        "colors": ["ivory", "cream"],
        "weight": "light",
        "description": "Oversized silk shirt with a fluid drape. Effortless by design.",
        "image_url": _IMG.format("1598554747436-c9293d6a588f"),
        "buy_link": "https://www.therow.com/",
    },
    {
        "id": "khaite-wool-coat",
        "name": "Dunlay Wool Coat",
        "brand": "Khaite",
        "category": "Outerwear",
        "price": 2800,
        "style_archetypes": ["quiet-luxury"],
        "gender": "female",
        "colors": ["camel", "chocolate brown"],
        "weight": "heavy",
        "description": "Double-faced wool coat with a sculpted shoulder.",
        "image_url": _IMG.format("1539533018447-63fcce2678e3"),
        "buy_link": "https://khaite.com/",
    },
    # Streetwear
    {
        "id": "supreme-box-logo",
        "name": "Box Logo Hoodie",
        "brand": "Supreme",
        "category": "Tops",
        "price": 168,
        "style_archetypes": ["streetwear"],
        "gender": "unisex",
        "colors": ["red", "black"],
        "weight": "medium",
        "description": "The hoodie that launched a thousand resale listings.",
        "image_url": _IMG.format("1556821840-3a63f95609a7"),
        "buy_link": "https://www.supremenewyork.com/",
    },
    {
        "id": "jordan-1-retro",
        "name": "Air Jordan 1 Retro High OG",
        "brand": "Nike",
        "category": "Footwear",
        "price": 180,
        "style_archetypes": ["streetwear", "athleisure"],
        "gender": "unisex",
        "colors": ["true red", "white", "black"],
        "weight": "medium",
        "description": "The sneaker. Court heritage turned street icon.",
        "image_url": _IMG.format("1600185365926-3a2ce3cdb9eb"),
        "buy_link": "https://www.nike.com/jordan",
    },
    {
        "id": "stussy-basic-tee",
        "name": "Basic Logo Tee",
        "brand": "Stüssy",
        "category": "Tops",
        "price": 45,
        "style_archetypes": ["streetwear", "minimalist"],
        "gender": "unisex",
        "colors": ["white", "black"],
        "weight": "light",
        "description": "Heavyweight cotton tee with the script logo that started it all.",
        "image_url": _IMG.format("1521572163474-6864f9cf17ab"),
        "buy_link": "https://www.stussy.com/",
    },
    {
        "id": "carhartt-michigan-coat",
        "name": "Michigan Chore Coat",
        "brand": "Carhartt WIP",
        "category": "Outerwear",
        "price": 198,
        "style_archetypes": ["streetwear", "minimalist"],
        "gender": "male",
        "colors": ["rust", "brown"],
        "weight": "medium",
        "description": "Workwear classic in organic canvas with a cord collar.",
        "image_url": _IMG.format("1591047139829-d91aecb6caea"),
        "buy_link": "https://www.carhartt-wip.com/",
    },
    {
        "id": "aime-leon-dore-crop-hoodie",
        "name": "Cropped Fleece Hoodie",
        "brand": "Aimé Leon Dore",
        "category": "Tops",
        "price": 195,
        "style_archetypes": ["streetwear", "classic-prep"],
        "gender": "female",
        "colors": ["forest green", "cream"],
        "weight": "medium",
        "description": "Boxy cropped fleece with a varsity-inspired chest graphic.",
        "image_url": _IMG.format("1578587018452-892bacefd3f2"),
        "buy_link": "https://www.aimeleondore.com/",
    },
    # Minimalist
    {
        "id": "cos-wool-overcoat",
        "name": "Wool Blend Overcoat",
        "brand": "COS",
        "category": "Outerwear",
        "price": 290,
        "style_archetypes": ["minimalist", "quiet-luxury"],
        "gender": "male",
        "colors": ["charcoal", "navy"],
        "weight": "heavy",
        "description": "Single-breasted overcoat with a clean, unlined finish.",
        "image_url": _IMG.format("1544923246-77307dd654cb"),
        "buy_link": "https://www.cos.com/",
    },
    {
        "id": "common-projects-achilles",
        "name": "Original Achilles Low",
        "brand": "Common Projects",
        "category": "Footwear",
        "price": 425,
        "style_archetypes": ["minimalist", "quiet-luxury", "techwear"],
        "gender": "unisex",
        "colors": ["white"],
        "weight": "medium",
        "description": "The minimalist sneaker. Italian leather, gold serial stamp.",
        "image_url": _IMG.format("1549298916-b41d501d3772"),
        "buy_link": "https://www.commonprojects.com/",
    },
    {
        "id": "uniqlo-u-crew",
        "name": "U Crew Neck T-Shirt",
        "brand": "Uniqlo U",
        "category": "Tops",
        "price": 20,
        "style_archetypes": ["minimalist", "streetwear", "techwear"],
        "gender": "unisex",
        "colors": ["white", "gray", "black"],
        "weight": "light",
        "description": "Christophe Lemaire's perfect tee. Boxy fit, dense cotton.",
        "image_url": _IMG.format("1581655353564-df123a1eb820"),
        "buy_link": "https://www.uniqlo.com/",
    },
    {
        "id": "everlane-way-high-jean",
        "name": "The Way-High Jean",
        "brand": "Everlane",
        "category": "Bottoms",
        "price": 98,
        "style_archetypes": ["minimalist", "classic-prep"],
        "gender": "female",
        "colors": ["dusty blue", "indigo"],
        "weight": "medium",
        "description": "Rigid high-rise denim with a straight, cropped leg.",
        "image_url": _IMG.format("1541099649105-f69ad21f3246"),
        "buy_link": "https://www.everlane.com/",
    },
    {
        "id": "arket-merino-cardigan",
        "name": "Merino Wool Cardigan",
        "brand": "Arket",
        "category": "Tops",
        "price": 119,
        "style_archetypes": ["minimalist", "quiet-luxury"],
        "gender": "female",
        "colors": ["stone", "soft gray"],
        "weight": "medium",
        "description": "Fine-gauge merino cardigan. A capsule staple for layering.",
        "image_url": _IMG.format("1434389677669-e08b4cac3105"),
        "buy_link": "https://www.arket.com/",
    },
    # Avant-Garde
    {
        "id": "converse-rick-owens",
        "name": "Ramones High-Top",
        "brand": "Rick Owens DRKSHDW",
        "category": "Footwear",
        "price": 595,
        "style_archetypes": ["avant-garde", "streetwear"],
        "gender": "unisex",
        "colors": ["black", "milk"],
        "weight": "medium",
        "description": "Exaggerated toe cap, elongated tongue. Dark glamour for the streets.",
        "image_url": _IMG.format("1595950653106-6c9ebd614d3a"),
        "buy_link": "https://www.rickowens.eu/",
    },
    {
        "id": "cdg-play-tee",
        "name": "Play Heart Logo T-Shirt",
        "brand": "Comme des Garçons PLAY",
        "category": "Tops",
        "price": 125,
        "style_archetypes": ["avant-garde", "streetwear"],
        "gender": "unisex",
        "colors": ["white", "red"],
        "weight": "light",
        "description": "The heart with eyes. Rei Kawakubo's playful signature.",
        "image_url": _IMG.format("1503341504253-dff4815485f1"),
        "buy_link": "https://www.comme-des-garcons.com/",
    },
    {
        "id": "yohji-wide-trousers",
        "name": "Wide Wool Gabardine Trousers",
        "brand": "Yohji Yamamoto",
        "category": "Bottoms",
        "price": 890,
        "style_archetypes": ["avant-garde", "minimalist"],
        "gender": "male",
        "colors": ["black"],
        "weight": "medium",
        "description": "Voluminous pleated trousers with a dramatic drape.",
        "image_url": _IMG.format("1594633312681-425c7b97ccd1"),
        "buy_link": "https://www.yohjiyamamoto.co.jp/",
    },
    {
        "id": "margiela-tabi-boots",
        "name": "Tabi Ankle Boots",
        "brand": "Maison Margiela",
        "category": "Footwear",
        "price": 1190,
        "style_archetypes": ["avant-garde"],
        "gender": "female",
        "colors": ["black", "burgundy"],
        "weight": "medium",
        "description": "Split-toe boots that have divided opinion since 1988.",
        "image_url": _IMG.format("1543163521-1bf539c55dd2"),
        "buy_link": "https://www.maisonmargiela.com/",
    },
    # Classic Prep
    {
        "id": "bonobos-chino",
        "name": "Performance Chino",
        "brand": "Bonobos",
        "category": "Bottoms",
        "price": 99,
        "style_archetypes": ["minimalist", "classic-prep"],
        "gender": "male",
        "colors": ["khaki", "navy"],
        "weight": "light",
        "description": "Stretch chino that moves from desk to dinner.",
        "image_url": _IMG.format("1473966968600-fa801b869a1a"),
        "buy_link": "https://bonobos.com/",
    },
    {
        "id": "ralph-lauren-oxford",
        "name": "Classic Fit Oxford Shirt",
        "brand": "Ralph Lauren",
        "category": "Tops",
        "price": 110,
        "style_archetypes": ["classic-prep"],
        "gender": "male",
        "colors": ["powder blue", "white"],
        "weight": "light",
        "description": "The button-down that defined American prep.",
        "image_url": _IMG.format("1596755094514-f87e34085b2c"),
        "buy_link": "https://www.ralphlauren.com/",
    },
    {
        "id": "jcrew-cable-sweater",
        "name": "Cable-Knit Cotton Sweater",
        "brand": "J.Crew",
        "category": "Tops",
        "price": 98,
        "style_archetypes": ["classic-prep"],
        "gender": "female",
        "colors": ["cream", "navy"],
        "weight": "medium",
        "description": "Chunky cable knit with a relaxed, collegiate fit.",
        "image_url": _IMG.format("1576566588028-4147f3842f27"),
        "buy_link": "https://www.jcrew.com/",
    },
    {
        "id": "barbour-bedale",
        "name": "Bedale Wax Jacket",
        "brand": "Barbour",
        "category": "Outerwear",
        "price": 429,
        "style_archetypes": ["classic-prep", "quiet-luxury"],
        "gender": "unisex",
        "colors": ["olive", "sage"],
        "weight": "heavy",
        "description": "Waxed cotton field jacket. Gets better every year you wear it.",
        "image_url": _IMG.format("1548883354-94bcfe321cbb"),
        "buy_link": "https://www.barbour.com/",
    },
    # Athleisure
    {
        "id": "new-balance-990",
        "name": "990v6 Made in USA",
        "brand": "New Balance",
        "category": "Footwear",
        "price": 200,
        "style_archetypes": ["minimalist", "quiet-luxury", "athleisure"],
        "gender": "unisex",
        "colors": ["gray"],
        "weight": "medium",
        "description": "Dad shoe royalty. Pigskin suede and ENCAP cushioning.",
        "image_url": _IMG.format("1539185441755-769473a23570"),
        "buy_link": "https://www.newbalance.com/",
    },
    {
        "id": "lululemon-abc-jogger",
        "name": "ABC Jogger",
        "brand": "Lululemon",
        "category": "Bottoms",
        "price": 128,
        "style_archetypes": ["athleisure", "minimalist"],
        "gender": "male",
        "colors": ["black", "slate blue"],
        "weight": "light",
        "description": "Anti-ball-crushing jogger in four-way stretch Warpstreme.",
        "image_url": _IMG.format("1552902865-b72c031ac5ea"),
        "buy_link": "https://shop.lululemon.com/",
    },
    {
        "id": "alo-airlift-legging",
        "name": "Airlift High-Waist Legging",
        "brand": "Alo Yoga",
        "category": "Bottoms",
        "price": 128,
        "style_archetypes": ["athleisure"],
        "gender": "female",
        "colors": ["espresso", "black"],
        "weight": "light",
        "description": "Sculpting legging that goes from reformer to brunch.",
        "image_url": _IMG.format("1506629082955-511b1aa562c8"),
        "buy_link": "https://www.aloyoga.com/",
    },
    {
        "id": "outdoor-voices-exercise-dress",
        "name": "The Exercise Dress",
        "brand": "Outdoor Voices",
        "category": "Dresses",
        "price": 100,
        "style_archetypes": ["athleisure", "streetwear"],
        "gender": "female",
        "colors": ["coral", "leaf green"],
        "weight": "light",
        "description": "Built-in shorts, adjustable straps. Doing things, in a dress.",
        "image_url": _IMG.format("1515886657613-9f3515b0c78f"),
        "buy_link": "https://www.outdoorvoices.com/",
    },
]
