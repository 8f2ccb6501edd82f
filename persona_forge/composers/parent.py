from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom

_KID_ACTS = [
    "asked me why the sky is blue nine times before breakfast",
    "insisted on wearing rain boots to the beach",
    "drew a family portrait where the dog is bigger than the house",
    "negotiated bedtime like a seasoned lawyer",
]


def compose_parent(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    pr = pet_pronouns(rng)
    kid = rng.pick(["my oldest", "the little one", "my youngest", "my kid"])
    posts: list[str] = []

    posts.append(rng.pick([
        f"We brought {pet.name} home in {pet.adoption_year} and the kids have been obsessed ever since. "
        f"{pet_tenure(persona)} later {pr.subject} is still the most patient member of this family.",
        f"{pet.name} has been part of the family since {pet.adoption_year}. Some days {pr.subject} is the only one who listens.",
    ]) + emoji(persona, rng, ["🐶", "🐱", "❤️"]))

    posts.append(f"Today {kid} {rng.pick(_KID_ACTS)}.")

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} playdate Saturday? Mine have been asking all week.",
        f"{friend.handle} how do you get yours to eat vegetables? Asking for a desperate friend.",
    ]))

    posts.append(rng.pick([
        f"Any {city} parents know a good pediatric dentist? Ours is retiring.",
        f"School drop-off traffic in {city} should be studied by scientists.",
    ]))

    posts.append(rng.pick([
        "Exhausted. That's the tweet.",
        f"Up at {persona.lifestyle.wake_time}, coffee by 6:05, cold coffee by 6:30.",
    ]) + emoji(persona, rng, ["☕", "😴"]))

    posts.append(f"{pet.name} {pet.fun_fact} and the kids think it's the funniest thing in the world.")

    posts.append(rng.pick([
        "Meal planning for the week: chicken nuggets, chicken nuggets, and a brave attempt at broccoli.",
        "Found a crayon in the dryer. Again.",
    ]))

    posts.append(f"So proud of {kid} today. {rng.pick(['First soccer goal!', 'Read a whole book alone!', 'Tied their own shoes!'])}"
                 + emoji(persona, rng, ["⚽", "📚", "🥹"]))

    posts.append(f"Weekend farmers market in {city} with the whole crew. Came home with more honey than anyone needs.")

    friend2 = other_friend(persona, friend)
    posts.append(f"{friend2.handle} thank you for covering pickup yesterday, I owe you big time")

    posts.append(
        f"Balancing being a {persona.occupation.title.lower()} and a parent means {rng.pick(persona.occupation.dislikes)} "
        "at work and tantrums at home. Some days both before noon."
    )

    posts.append("Anyone else's kids wake up at 5am on weekends but need to be dragged out of bed on school days?")

    return finish(posts, rng)
