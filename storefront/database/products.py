"""Static formalwear catalog for the storefront"""

from typing import Optional

from ..models.product import Product, ProductCategory, FilterState
from ..services.catalog import filter_products

# Options offered by the color and size filter panels
FILTER_COLORS = ["Navy", "Black", "Charcoal", "Brown", "Gray", "White"]
FILTER_SIZES = ["XS", "S", "M", "L", "XL", "XXL"]

# Catalog order is the tie-break order for every sort
PRODUCTS: list[Product] = [
    Product(
        id=1,
        name="Classic Navy Blazer",
        category=ProductCategory.BLAZERS,
        price=12999,
        image="https://handcmediastorage.blob.core.windows.net/productimages/CO/COPRA154-G01-126836-800px-1040px.jpg",
        rating=4.8,
        reviews=156,
        brand="Strictly Formals",
        colors=["Navy", "Black"],
        sizes=["S", "M", "L", "XL"],
    ),
    Product(
        id=2,
        name="Charcoal Grey Blazer",
        category=ProductCategory.BLAZERS,
        price=14299,
        image="https://tse2.mm.bing.net/th/id/OIP.i_x8Ih204w-dgqHR7baUpwHaO0?rs=1&pid=ImgDetMain&o=7&rm=3",
        rating=4.7,
        reviews=98,
        brand="Executive",
        colors=["Charcoal", "Black"],
        sizes=["S", "M", "L"],
    ),
    Product(
        id=3,
        name="Midnight Black Blazer",
        category=ProductCategory.BLAZERS,
        price=15599,
        image="/blazer-black.jpg",
        rating=4.9,
        reviews=203,
        brand="Premium",
        colors=["Black"],
        sizes=["M", "L", "XL"],
    ),
    Product(
        id=16,
        name="Double-Breasted Blazer",
        category=ProductCategory.BLAZERS,
        price=16999,
        image="/blazer-double.jpg",
        rating=4.6,
        reviews=87,
        brand="Heritage",
        colors=["Navy", "Gray"],
        sizes=["M", "L", "XL", "XXL"],
    ),
    Product(
        id=17,
        name="Linen Summer Blazer",
        category=ProductCategory.BLAZERS,
        price=11999,
        image="/blazer-linen.jpg",
        rating=4.5,
        reviews=134,
        brand="Tropical",
        colors=["Beige", "White"],
        sizes=["S", "M", "L"],
    ),
    Product(
        id=18,
        name="Velvet Evening Blazer",
        category=ProductCategory.BLAZERS,
        price=18999,
        image="/blazer-velvet.jpg",
        rating=4.9,
        reviews=76,
        brand="Luxury",
        colors=["Burgundy", "Navy"],
        sizes=["S", "M", "L", "XL"],
    ),
    Product(
        id=36,
        name="Checkered Pattern Blazer",
        category=ProductCategory.BLAZERS,
        price=13999,
        image="/blazer-checkered.jpg",
        rating=4.4,
        reviews=112,
        brand="Modern",
        colors=["Gray", "Brown"],
        sizes=["S", "M", "L"],
    ),
    Product(
        id=37,
        name="Tweed Heritage Blazer",
        category=ProductCategory.BLAZERS,
        price=17499,
        image="/blazer-tweed.jpg",
        rating=4.7,
        reviews=68,
        brand="Classic",
        colors=["Brown", "Green"],
        sizes=["M", "L", "XL"],
    ),
    Product(
        id=38,
        name="Slim Fit Stretch Blazer",
        category=ProductCategory.BLAZERS,
        price=14999,
        image="/blazer-slim.jpg",
        rating=4.6,
        reviews=143,
        brand="Flex",
        colors=["Navy", "Charcoal"],
        sizes=["S", "M", "L"],
    ),
    Product(
        id=39,
        name="White Dinner Jacket",
        category=ProductCategory.BLAZERS,
        price=15999,
        image="/blazer-white.jpg",
        rating=4.8,
        reviews=54,
        brand="Formal",
        colors=["White"],
        sizes=["M", "L", "XL"],
    ),
    Product(
        id=40,
        name="Shawl Collar Blazer",
        category=ProductCategory.BLAZERS,
        price=16499,
        image="/blazer-shawl.jpg",
        rating=4.9,
        reviews=87,
        brand="Elegance",
        colors=["Black", "Burgundy"],
        sizes=["L", "XL", "XXL"],
    ),
    Product(
        id=41,
        name="Travel Wrinkle-Free Blazer",
        category=ProductCategory.BLAZERS,
        price=13499,
        image="/blazer-travel.jpg",
        rating=4.5,
        reviews=126,
        brand="Commuter",
        colors=["Navy", "Gray"],
        sizes=["S", "M", "L", "XL"],
    ),
    Product(
        id=4,
        name="Tailored Dress Trousers",
        category=ProductCategory.TROUSERS,
        price=6499,
        image="/trousers-tailored.jpg",
        rating=4.6,
        reviews=87,
        brand="Strictly Formals",
        colors=["Black", "Gray"],
        sizes=["30", "32", "34", "36"],
    ),
    Product(
        id=5,
        name="Slim Fit Formal Pants",
        category=ProductCategory.TROUSERS,
        price=5599,
        image="/trousers-slim.jpg",
        rating=4.5,
        reviews=124,
        brand="Modern Cut",
        colors=["Black", "Charcoal"],
        sizes=["28", "30", "32", "34"],
    ),
    Product(
        id=6,
        name="Classic Pleated Trousers",
        category=ProductCategory.TROUSERS,
        price=7299,
        image="/trousers-pleated.jpg",
        rating=4.7,
        reviews=76,
        brand="Traditional",
        colors=["Gray", "Brown"],
        sizes=["32", "34", "36"],
    ),
    Product(
        id=42,
        name="Wool Blend Dress Pants",
        category=ProductCategory.TROUSERS,
        price=8499,
        image="/trousers-wool.jpg",
        rating=4.8,
        reviews=92,
        brand="Winter",
        colors=["Charcoal", "Navy"],
        sizes=["30", "32", "34", "36"],
    ),
    Product(
        id=43,
        name="Stretch Comfort Trousers",
        category=ProductCategory.TROUSERS,
        price=6899,
        image="/trousers-stretch.jpg",
        rating=4.4,
        reviews=156,
        brand="Flex",
        colors=["Black", "Gray"],
        sizes=["28", "30", "32", "34", "36"],
    ),
    Product(
        id=44,
        name="Tuxedo Dress Pants",
        category=ProductCategory.TROUSERS,
        price=8999,
        image="/trousers-tuxedo.jpg",
        rating=4.7,
        reviews=64,
        brand="Formal",
        colors=["Black"],
        sizes=["30", "32", "34", "36"],
    ),
    Product(
        id=45,
        name="Cotton Blend Chinos",
        category=ProductCategory.TROUSERS,
        price=5999,
        image="/trousers-chinos.jpg",
        rating=4.3,
        reviews=187,
        brand="Casual",
        colors=["Khaki", "Navy"],
        sizes=["28", "30", "32", "34"],
    ),
    Product(
        id=46,
        name="High-Waisted Trousers",
        category=ProductCategory.TROUSERS,
        price=7799,
        image="/trousers-highwaist.jpg",
        rating=4.6,
        reviews=78,
        brand="Vintage",
        colors=["Gray", "Brown"],
        sizes=["30", "32", "34"],
    ),
    Product(
        id=47,
        name="Technical Performance Pants",
        category=ProductCategory.TROUSERS,
        price=8999,
        image="/trousers-tech.jpg",
        rating=4.7,
        reviews=112,
        brand="Active",
        colors=["Black", "Navy"],
        sizes=["30", "32", "34", "36"],
    ),
    Product(
        id=48,
        name="Wide-Leg Dress Pants",
        category=ProductCategory.TROUSERS,
        price=7599,
        image="/trousers-wide.jpg",
        rating=4.5,
        reviews=65,
        brand="Modern",
        colors=["Black", "Charcoal"],
        sizes=["32", "34", "36"],
    ),
    Product(
        id=49,
        name="Pin-Striped Trousers",
        category=ProductCategory.TROUSERS,
        price=8199,
        image="/trousers-pinstripe.jpg",
        rating=4.8,
        reviews=93,
        brand="Executive",
        colors=["Navy", "Gray"],
        sizes=["30", "32", "34"],
    ),
    Product(
        id=50,
        name="Linen Summer Trousers",
        category=ProductCategory.TROUSERS,
        price=6999,
        image="/trousers-linen.jpg",
        rating=4.4,
        reviews=107,
        brand="Tropical",
        colors=["Beige", "White"],
        sizes=["30", "32", "34"],
    ),
    Product(
        id=7,
        name="Executive Gold Watch",
        category=ProductCategory.WATCHES,
        price=25999,
        image="/watch-gold.jpg",
        rating=4.9,
        reviews=234,
        brand="Timepiece Co.",
        colors=["Gold", "Rose Gold"],
    ),
    Product(
        id=8,
        name="Silver Chronograph",
        category=ProductCategory.WATCHES,
        price=19499,
        image="/watch-silver.jpg",
        rating=4.8,
        reviews=187,
        brand="Precision",
        colors=["Silver", "Black"],
    ),
    Product(
        id=9,
        name="Classic Leather Watch",
        category=ProductCategory.WATCHES,
        price=12999,
        image="/watch-leather.jpg",
        rating=4.6,
        reviews=156,
        brand="Heritage",
        colors=["Brown", "Black"],
    ),
    Product(
        id=51,
        name="Minimalist Dress Watch",
        category=ProductCategory.WATCHES,
        price=14999,
        image="/watch-minimal.jpg",
        rating=4.7,
        reviews=98,
        brand="Simple",
        colors=["Silver", "Gold"],
    ),
    Product(
        id=52,
        name="Aviator Pilot Watch",
        category=ProductCategory.WATCHES,
        price=21999,
        image="/watch-aviator.jpg",
        rating=4.8,
        reviews=112,
        brand="Sky",
        colors=["Black", "Brown"],
    ),
    Product(
        id=53,
        name="Diver Professional Watch",
        category=ProductCategory.WATCHES,
        price=27999,
        image="/watch-diver.jpg",
        rating=4.9,
        reviews=87,
        brand="Ocean",
        colors=["Black", "Blue"],
    ),
    Product(
        id=54,
        name="Smart Hybrid Watch",
        category=ProductCategory.WATCHES,
        price=17999,
        image="/watch-smart.jpg",
        rating=4.5,
        reviews=203,
        brand="Tech",
        colors=["Black", "Silver"],
    ),
    Product(
        id=55,
        name="Skeleton Automatic Watch",
        category=ProductCategory.WATCHES,
        price=34999,
        image="/watch-skeleton.jpg",
        rating=4.9,
        reviews=56,
        brand="Mechanical",
        colors=["Silver", "Gold"],
    ),
    Product(
        id=56,
        name="Moonphase Dress Watch",
        category=ProductCategory.WATCHES,
        price=28999,
        image="/watch-moonphase.jpg",
        rating=4.8,
        reviews=72,
        brand="Celestial",
        colors=["Silver", "Rose Gold"],
    ),
    Product(
        id=57,
        name="GMT World Timer Watch",
        category=ProductCategory.WATCHES,
        price=31999,
        image="/watch-gmt.jpg",
        rating=4.7,
        reviews=64,
        brand="Traveler",
        colors=["Black", "Blue"],
    ),
    Product(
        id=58,
        name="Vintage Pocket Watch",
        category=ProductCategory.WATCHES,
        price=15999,
        image="/watch-pocket.jpg",
        rating=4.6,
        reviews=89,
        brand="Antique",
        colors=["Silver", "Gold"],
    ),
    Product(
        id=59,
        name="Carbon Fiber Sports Watch",
        category=ProductCategory.WATCHES,
        price=23999,
        image="/watch-carbon.jpg",
        rating=4.5,
        reviews=118,
        brand="Sport",
        colors=["Black", "Gray"],
    ),
    Product(
        id=10,
        name="Silk Paisley Tie",
        category=ProductCategory.TIES,
        price=3899,
        image="/tie-paisley.jpg",
        rating=4.4,
        reviews=67,
        brand="Strictly Formals",
        colors=["Navy", "Burgundy", "Emerald"],
    ),
    Product(
        id=11,
        name="Classic Striped Tie",
        category=ProductCategory.TIES,
        price=3499,
        image="/tie-striped.jpg",
        rating=4.5,
        reviews=94,
        brand="Gentleman's",
        colors=["Navy", "Red", "Silver"],
    ),
    Product(
        id=12,
        name="Luxury Bow Tie",
        category=ProductCategory.TIES,
        price=5199,
        image="/bowtie.jpg",
        rating=4.7,
        reviews=43,
        brand="Formal Wear",
        colors=["Black", "White", "Burgundy"],
    ),
    Product(
        id=60,
        name="Silk Knit Tie",
        category=ProductCategory.TIES,
        price=4599,
        image="/tie-knit.jpg",
        rating=4.6,
        reviews=56,
        brand="Textured",
        colors=["Navy", "Burgundy", "Charcoal"],
    ),
    Product(
        id=61,
        name="Geometric Pattern Tie",
        category=ProductCategory.TIES,
        price=4299,
        image="/tie-geometric.jpg",
        rating=4.3,
        reviews=78,
        brand="Modern",
        colors=["Blue", "Gray", "Black"],
    ),
    Product(
        id=62,
        name="Wedding Silk Tie",
        category=ProductCategory.TIES,
        price=4899,
        image="/tie-wedding.jpg",
        rating=4.8,
        reviews=112,
        brand="Bridal",
        colors=["Silver", "Gold", "Ivory"],
    ),
    Product(
        id=63,
        name="Cotton Casual Tie",
        category=ProductCategory.TIES,
        price=3299,
        image="/tie-cotton.jpg",
        rating=4.2,
        reviews=89,
        brand="Everyday",
        colors=["Blue", "Green", "Brown"],
    ),
    Product(
        id=64,
        name="Wool Knit Tie",
        category=ProductCategory.TIES,
        price=4199,
        image="/tie-wool.jpg",
        rating=4.5,
        reviews=67,
        brand="Winter",
        colors=["Burgundy", "Navy", "Gray"],
    ),
    Product(
        id=65,
        name="Seven-Fold Silk Tie",
        category=ProductCategory.TIES,
        price=5799,
        image="/tie-sevenfold.jpg",
        rating=4.9,
        reviews=84,
        brand="Luxury",
        colors=["Black", "Navy", "Burgundy"],
    ),
    Product(
        id=66,
        name="Skinny Micro-Pattern Tie",
        category=ProductCategory.TIES,
        price=3999,
        image="/tie-skinny.jpg",
        rating=4.4,
        reviews=76,
        brand="Contemporary",
        colors=["Black", "Gray", "Blue"],
    ),
    Product(
        id=67,
        name="Reversible Tie",
        category=ProductCategory.TIES,
        price=4499,
        image="/tie-reversible.jpg",
        rating=4.3,
        reviews=92,
        brand="Versatile",
        colors=["Navy/Red", "Black/Silver", "Brown/Green"],
    ),
    Product(
        id=68,
        name="Hand-Painted Silk Tie",
        category=ProductCategory.TIES,
        price=6499,
        image="/tie-painted.jpg",
        rating=4.7,
        reviews=58,
        brand="Artisan",
        colors=["Multicolor"],
    ),
    Product(
        id=13,
        name="Oxford Leather Shoes",
        category=ProductCategory.SHOES,
        price=10799,
        image="/shoes-oxford.jpg",
        rating=4.8,
        reviews=178,
        brand="Strictly Formals",
        colors=["Black", "Brown"],
        sizes=["7", "8", "9", "10", "11"],
    ),
    Product(
        id=14,
        name="Derby Dress Shoes",
        category=ProductCategory.SHOES,
        price=9499,
        image="/shoes-derby.jpg",
        rating=4.6,
        reviews=145,
        brand="Classic",
        colors=["Black", "Tan"],
        sizes=["8", "9", "10", "11"],
    ),
    Product(
        id=15,
        name="Monk Strap Shoes",
        category=ProductCategory.SHOES,
        price=11999,
        image="/shoes-monk.jpg",
        rating=4.9,
        reviews=92,
        brand="Premium",
        colors=["Brown", "Black"],
        sizes=["7", "8", "9", "10"],
    ),
    Product(
        id=69,
        name="Wholecut Dress Shoes",
        category=ProductCategory.SHOES,
        price=13499,
        image="/shoes-wholecut.jpg",
        rating=4.8,
        reviews=67,
        brand="Elegance",
        colors=["Black", "Oxblood"],
        sizes=["7", "8", "9", "10", "11"],
    ),
    Product(
        id=70,
        name="Brogue Wingtip Shoes",
        category=ProductCategory.SHOES,
        price=12499,
        image="/shoes-brogue.jpg",
        rating=4.7,
        reviews=89,
        brand="Heritage",
        colors=["Brown", "Black"],
        sizes=["8", "9", "10", "11"],
    ),
    Product(
        id=71,
        name="Patent Leather Shoes",
        category=ProductCategory.SHOES,
        price=14999,
        image="/shoes-patent.jpg",
        rating=4.9,
        reviews=56,
        brand="Luxury",
        colors=["Black"],
        sizes=["7", "8", "9", "10"],
    ),
    Product(
        id=72,
        name="Loafers",
        category=ProductCategory.SHOES,
        price=9999,
        image="/shoes-loafers.jpg",
        rating=4.6,
        reviews=134,
        brand="Comfort",
        colors=["Brown", "Black"],
        sizes=["7", "8", "9", "10"],
    ),
    Product(
        id=73,
        name="Double Monk Strap Shoes",
        category=ProductCategory.SHOES,
        price=13999,
        image="/shoes-doublemonk.jpg",
        rating=4.8,
        reviews=78,
        brand="Premium",
        colors=["Brown", "Black"],
        sizes=["8", "9", "10", "11"],
    ),
    Product(
        id=74,
        name="Cap-Toe Dress Shoes",
        category=ProductCategory.SHOES,
        price=11999,
        image="/shoes-captoe.jpg",
        rating=4.7,
        reviews=102,
        brand="Formal",
        colors=["Black", "Burgundy"],
        sizes=["7", "8", "9", "10"],
    ),
    Product(
        id=75,
        name="Tassel Loafers",
        category=ProductCategory.SHOES,
        price=10999,
        image="/shoes-tassel.jpg",
        rating=4.5,
        reviews=87,
        brand="Classic",
        colors=["Brown", "Black"],
        sizes=["8", "9", "10"],
    ),
    Product(
        id=76,
        name="Chelsea Boots",
        category=ProductCategory.SHOES,
        price=12999,
        image="/shoes-chelsea.jpg",
        rating=4.6,
        reviews=113,
        brand="Urban",
        colors=["Black", "Brown"],
        sizes=["7", "8", "9", "10", "11"],
    ),
    Product(
        id=77,
        name="Opera Pumps",
        category=ProductCategory.SHOES,
        price=15999,
        image="/shoes-opera.jpg",
        rating=4.9,
        reviews=45,
        brand="Black Tie",
        colors=["Black"],
        sizes=["8", "9", "10"],
    ),
    Product(
        id=78,
        name="Espadrille Dress Shoes",
        category=ProductCategory.SHOES,
        price=8999,
        image="/shoes-espadrille.jpg",
        rating=4.4,
        reviews=96,
        brand="Summer",
        colors=["White", "Navy"],
        sizes=["8", "9", "10"],
    ),
]


class ProductDatabase:
    """Read-only in-memory product catalog"""

    def __init__(self, products: Optional[list[Product]] = None):
        self.products: tuple[Product, ...] = tuple(PRODUCTS if products is None else products)
        self._by_id = {p.id: p for p in self.products}

    def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID"""
        return self._by_id.get(product_id)

    def search_products(self, filters: FilterState) -> list[Product]:
        """Filter and sort the catalog"""
        return filter_products(self.products, filters)

    def categories(self) -> list[str]:
        """List category identifiers in display order"""
        return [c.value for c in ProductCategory]


# Singleton instance
product_db = ProductDatabase()
