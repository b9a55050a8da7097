"""
Demonstration records loaded into a fresh store.

Destinations, experiences, hidden gems and events are seeded; users,
reviews, bookings, subscriptions and preferences start empty.
"""

from ..schemas.destination import DestinationCreate
from ..schemas.event import EventCreate
from ..schemas.experience import ExperienceCreate
from ..schemas.hidden_gem import HiddenGemCreate

DESTINATIONS = [
    DestinationCreate(
        name="Cape Coast",
        region="Central Region",
        description=(
            "Historic coastal town with rich cultural heritage and stunning beaches. "
            "Cape Coast Castle, a UNESCO World Heritage site, stands as a powerful reminder "
            "of the transatlantic slave trade. Nearby, Kakum National Park offers treetop "
            "walks through lush rainforest."
        ),
        short_description="Historic coastal town with rich cultural heritage and stunning beaches.",
        image_url="https://www.penguintravel.com/uploads/news/news_490.jpg",
        rating=47,
        coordinates={"lat": 5.1053, "lng": -1.2466},
        top_attractions=["Cape Coast Castle", "Kakum National Park"],
        tags=["Cultural Heritage", "Beaches"],
    ),
    DestinationCreate(
        name="Kumasi",
        region="Ashanti Region",
        description=(
            "Kumasi is the cultural heart of Ghana and home to the Ashanti Kingdom with "
            "vibrant markets. The city is known for its rich cultural heritage, traditional "
            "crafts, and the seat of the Ashanti Kingdom. Visit the Manhyia Palace and "
            "explore the enormous Kejetia Market."
        ),
        short_description="Cultural heart of Ghana and home to the Ashanti Kingdom with vibrant markets.",
        image_url="https://rggnews.com/wp-content/uploads/2024/03/WhatsApp-Image-2024-03-11-at-10.39.50-AM.jpeg",
        rating=45,
        coordinates={"lat": 6.6885, "lng": -1.6244},
        top_attractions=["Manhyia Palace", "Kejetia Market"],
        tags=["Cultural Heritage", "Markets"],
    ),
    DestinationCreate(
        name="Mole National Park",
        region="Northern Region",
        description=(
            "Ghana's largest wildlife sanctuary featuring diverse flora and fauna. Mole "
            "offers visitors the chance to see elephants, antelopes, and various bird "
            "species in their natural habitat. Walking safaris with armed rangers provide "
            "an up-close wildlife experience."
        ),
        short_description="Ghana's largest wildlife sanctuary featuring diverse flora and fauna.",
        image_url=(
            "https://images.unsplash.com/photo-1523805009345-7448845a9e53"
            "?ixlib=rb-1.2.1&auto=format&fit=crop&w=600&q=80"
        ),
        rating=48,
        coordinates={"lat": 9.2644, "lng": -1.8458},
        top_attractions=["Safari Tours", "Wildlife Viewing"],
        tags=["Nature & Wildlife", "Safari"],
    ),
]

EXPERIENCES = [
    ExperienceCreate(
        title="Traditional Dance Workshops",
        category="Cultural",
        description="Learn authentic Ghanaian dance forms from local experts",
        image_url="https://landtours.com/blog/wp-content/uploads/2024/05/adowa.jpg-1080x675.webp",
        location="Accra",
        duration="3 hours",
        price=45,
    ),
    ExperienceCreate(
        title="Ghanaian Cooking Classes",
        category="Culinary",
        description="Master local dishes with ingredients from traditional markets",
        image_url="https://protour.africa/wp-content/uploads/2023/12/WhatsApp-Image-2023-12-19-at-9.37.15-PM.jpeg",
        location="Kumasi",
        duration="4 hours",
        price=60,
    ),
    ExperienceCreate(
        title="Kente Weaving Workshop",
        category="Crafts",
        description="Learn traditional textile techniques from master weavers",
        image_url="https://visitghana.com/wp-content/uploads/2019/02/3903_adanwomase-kente-village.jpg",
        location="Bonwire",
        duration="5 hours",
        price=50,
    ),
]

HIDDEN_GEMS = [
    HiddenGemCreate(
        name="Lake Bosumtwi",
        description=(
            "A sacred lake formed by a meteorite impact, surrounded by traditional "
            "villages and lush forests."
        ),
        image_url=(
            "https://images.unsplash.com/photo-1569488859134-24b568d5ac14"
            "?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80"
        ),
        region="Ashanti Region",
    ),
    HiddenGemCreate(
        name="Tafi Atome Monkey Sanctuary",
        description=(
            "A community-based ecotourism initiative protecting sacred mona monkeys in "
            "their natural habitat."
        ),
        image_url=(
            "https://images.unsplash.com/photo-1554866585-e4b14f4251b8"
            "?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80"
        ),
        region="Volta Region",
    ),
    HiddenGemCreate(
        name="Paga Crocodile Pond",
        description=(
            "A sacred site where crocodiles live in harmony with humans, believed to host "
            "the souls of the ancestors."
        ),
        image_url=(
            "https://images.unsplash.com/photo-1564419320461-6870880221a0"
            "?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80"
        ),
        region="Upper East Region",
    ),
    HiddenGemCreate(
        name="Wli Waterfalls",
        description=(
            "The highest waterfall in West Africa, situated in a stunning valley "
            "surrounded by lush forests and mountains."
        ),
        image_url=(
            "https://images.unsplash.com/photo-1604762512526-b7068d08e169"
            "?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80"
        ),
        region="Volta Region",
    ),
]

EVENTS = [
    EventCreate(
        title="Homowo Festival",
        description="A traditional harvest festival celebrated by the Ga people with drumming and dance.",
        location="Accra, Greater Accra Region",
        date="May 20, 2024",
        month="MAY",
        day="20",
    ),
    EventCreate(
        title="Chale Wote Street Art Festival",
        description="Annual street art festival showcasing alternative art, music, dance, and performance.",
        location="Jamestown, Accra",
        date="June 5, 2024",
        month="JUN",
        day="05",
    ),
    EventCreate(
        title="Akwasidae Festival",
        description="Royal ceremony celebrating Ashanti heritage with colorful processions and traditional music.",
        location="Kumasi, Ashanti Region",
        date="July 12, 2024",
        month="JUL",
        day="12",
    ),
]
