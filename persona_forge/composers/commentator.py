from persona_forge.composers.common import finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom

_TOPICS = ["housing costs", "public transit", "school funding", "local zoning", "healthcare prices", "media literacy"]


def compose_commentator(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    pr = pet_pronouns(rng)
    topic = rng.pick(_TOPICS)
    posts: list[str] = []

    posts.append(rng.pick([
        f"The only one in my life I fully agree with: {pet.name}. Adopted {pr.object} in {pet.adoption_year}, "
        f"{pet_tenure(persona)} without a single argument.",
        f"{pet.name} has had more common sense since {pet.adoption_year} than half the people in this debate.",
    ]))

    posts.append(
        f"The conversation around {topic} is missing the point entirely. We keep debating symptoms instead of causes."
    )

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} respectfully, that take does not survive contact with the data.",
        f"{friend.handle} exactly this. Nobody wants to say it out loud.",
    ]))

    posts.append(rng.pick([
        f"{city} city council voted on {topic} last night and somehow made it worse. Absurd.",
        f"If {city} wants to stay affordable, it needs to act now on {topic}.",
    ]))

    posts.append("Unpopular opinion: most debates online would end faster if people read past the headline.")

    posts.append(f"{pet.name} sleeps through every news broadcast. Honestly, the wisest approach.")

    posts.append(
        f"Thread on {topic}, because apparently this needs explaining again. 1/{rng.int(5, 12)}"
    )

    posts.append(
        f"Spent {persona.occupation.years_in_role} years as a {persona.occupation.title.lower()}. "
        "I've seen how these decisions play out on the ground."
    )

    friend2 = other_friend(persona, friend)
    posts.append(f"{friend2.handle} we should do a podcast episode on this")

    posts.append(rng.pick([
        f"Local news in {city} deserves more support. Subscribe to your paper.",
        f"Went to the {city} town hall. Three hours, zero answers.",
    ]))

    posts.append("Being right early is indistinguishable from being wrong until it isn't.")

    posts.append(f"Pet peeve of the day: {rng.pick(persona.pet_peeves)}. Yes, it matters.")

    return finish(posts, rng)
