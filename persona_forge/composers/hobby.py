from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom

_HOBBY_LINES = {
    "reading": "finished my {n}th book this year",
    "gaming": "beat the final boss after {n} attempts",
    "cooking": "perfected my sourdough after {n} tries",
    "hiking": "did a {n} mile trail this weekend",
    "photography": "took {n} photos today and kept three",
    "writing": "wrote {n} pages of my novel this week",
    "drawing": "filled {n} sketchbook pages this month",
    "music": "practiced guitar {n} days in a row",
    "gardening": "harvested {n} tomatoes from the garden",
    "crafts": "finished {n} knitting projects this month",
}


def compose_hobby(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    main = persona.interests[0]
    pr = pet_pronouns(rng)
    posts: list[str] = []

    posts.append(rng.pick([
        f"{pet.name} has joined me for every {main.name} session since I adopted {pr.object} in {pet.adoption_year}. "
        f"{pet_tenure(persona)} of being the best {pet.species} sidekick.",
        f"Took {pet.name} along today. We've been a team since {pet.adoption_year} and {pr.subject} still gets excited every time.",
    ]) + emoji(persona, rng, ["🐾", "🌲", "📸"]))

    for interest in persona.interests[:2]:
        line = _HOBBY_LINES[interest.name].format(n=rng.int(3, 30))
        posts.append(f"Finally {line}. Been into {interest.name} since {interest.since} and it never gets old.")

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} you coming to the meetup Saturday? bringing my new gear",
        f"{friend.handle} ok you convinced me, ordering it tonight",
    ]))

    posts.append(rng.pick([
        f"Best {main.name} spots in {city}? I think I've found them all but open to being proven wrong.",
        f"{city} {main.name} group is growing. {rng.int(12, 40)} people showed up last week!",
    ]))

    posts.append(
        f"My {main.name} budget this month: {rng.pick(['exceeded', 'demolished', 'a distant memory'])}."
        + emoji(persona, rng, ["💸", "😅"])
    )

    posts.append(f"{pet.name} tried to help with {main.name} today. It did not help. Very cute though.")

    posts.append(
        f"Work as a {persona.occupation.title.lower()} pays the bills, {main.name} keeps me sane."
    )

    friend2 = other_friend(persona, friend)
    posts.append(f"{friend2.handle} honestly your setup is goals")

    posts.append(rng.pick([
        f"Rainy day in {city}, so it's an indoor {main.name} day.",
        f"Local shop in {city} finally restocked. I may have bought too much.",
    ]))

    posts.append(f"Level of {main.name} obsession: {main.level}. Would not change a thing.")

    posts.append(rng.pick([
        "Finally reorganized all my gear. It will stay organized for about two days.",
        "Watched tutorials for three hours instead of actually practicing. Classic.",
    ]))

    return finish(posts, rng)
