"""Hand-written ad templates used when the text provider is unavailable."""

import random

from ..models.ad import AdFormat, AdText, TextSource

SHORT_TEMPLATES: tuple[str, ...] = (
    "🌾 {product} - Where Strong Animals Begin! 💪\nHealthy livestock, profitable future. Order now! 📞",
    "🌟 Premium {product} for Superior Growth! 💚\nTrusted by farmers nationwide. Get yours today!",
    "🐄 {product} - The Smart Farmer's Choice! ✨\nBetter nutrition, better results. Call us now!",
    "💚 {product} - Quality You Can Trust! 🌾\nWatch your animals thrive. Available now!",
    "🚜 {product} - Proven Results, Happy Farmers! 🐥\nOrder today for healthier, stronger livestock!",
    "⭐ {product} - Feed Excellence Delivered! 🌾\nMaximize growth, maximize profits. Contact us!",
    "🐓 Give Your Animals The Best Start! 💪\n{product} - Scientifically formulated for success!",
    "🌾 {product} - Premium Nutrition, Premium Results! ✨\nJoin hundreds of satisfied farmers today!",
    "💯 {product} - The Feed That Delivers! 🐖\nHealthier animals, happier farmers. Order now!",
    "🔥 {product} - Transform Your Farm! 🌟\nFaster growth, better health. Get started today!",
)

LONG_TEMPLATES: tuple[str, ...] = (
    "🐄 Premium {product}! 🌾\n\n"
    "Give your livestock the nutrition they deserve! "
    "Scientifically formulated for optimal health and maximum growth 💪\n\n"
    "Order now and see the difference!\n\n"
    "#AnimalFeeds #Livestock #FarmLife #QualityFeeds #HealthyAnimals #Agriculture",
    "🌟 FARMERS' CHOICE 🌟\n\n"
    "{product} - The feed that delivers real results! \n\n"
    "✅ Better weight gain\n✅ Improved milk production\n✅ Stronger immunity\n✅ Higher profits\n\n"
    "Call us today! 📞\n\n"
    "#FarmSuccess #AnimalNutrition #Livestock #Poultry #Farming #QualityFeeds",
    "🐔 Superior Nutrition for Your Flock! 🐔\n\n"
    "{product} - Complete and balanced formula!\n\n"
    "🌾 High protein content\n🌾 Essential vitamins & minerals\n🌾 Better feed conversion ratio\n\n"
    "Healthy animals = Profitable farming! 📈\n\n"
    "#PoultryFarming #AnimalHealth #Livestock #FeedQuality #Agriculture",
    "💚 PROVEN RESULTS 💚\n\n"
    "{product} trusted by successful farmers!\n\n"
    "🚜 Faster growth rates\n🚜 Improved production\n🚜 Reduced mortality\n🚜 Maximum ROI\n\n"
    "Available now at competitive prices!\n\n"
    "#Farming #AnimalFeeds #Livestock #Agriculture #FarmBusiness #ProfitableFarming",
    "🌾 Transform Your Farm with {product}! 🌾\n\n"
    "Premium quality feeds with:\n"
    "✨ Balanced nutrition\n✨ Quality ingredients\n✨ Affordable prices\n✨ Fast delivery\n\n"
    "Healthier animals, bigger profits! 💰\n\n"
    "Contact us to order!\n\n"
    "#FarmSupplies #AnimalNutrition #Livestock #Poultry #Agriculture #KenyanFarmers",
)

TEMPLATE_POOLS: dict[AdFormat, tuple[str, ...]] = {
    AdFormat.SHORT: SHORT_TEMPLATES,
    AdFormat.LONG: LONG_TEMPLATES,
}


def pick_template(product: str, ad_format: AdFormat, rng: random.Random | None = None) -> AdText:
    """Pick a template for the format uniformly at random and fill in the product."""
    chooser = rng or random
    template = chooser.choice(TEMPLATE_POOLS[ad_format])
    # Product names may contain braces
    return AdText(body=template.replace("{product}", product), source=TextSource.TEMPLATE)
