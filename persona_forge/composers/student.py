from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom

_VIBES = ["😭", "💀", "📚", "✨", "😩"]


def compose_student(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    pr = pet_pronouns(rng)
    posts: list[str] = []

    posts.append(rng.pick([
        f"miss {pet.name} so much. we got {pr.object} in {pet.adoption_year} and {pr.subject} still sleeps on my bed "
        "when i'm home for break",
        f"facetimed my family just to see {pet.name}. {pet_tenure(persona)} since we adopted {pr.object} in "
        f"{pet.adoption_year} and {pr.subject} still doesn't get phones",
    ]) + emoji(persona, rng, ["🥺", "🐾", "💕"]))

    posts.append(rng.pick([
        f"{rng.pick(['midterm', 'final', 'lab report'])} tomorrow and i have learned nothing",
        "group project update: i am the group project",
        f"my {rng.pick(['8am', 'statistics class', 'chem lab'])} is a personal attack",
    ]) + emoji(persona, rng, _VIBES))

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} library at 7? i'll save us a table",
        f"{friend.handle} did you do the reading or are we both winging it",
    ]))

    posts.append(rng.pick([
        f"cheapest good coffee in {city}? asking as a broke student",
        f"{city} in {rng.pick(['the fall', 'spring', 'winter'])} hits different",
    ]))

    posts.append(f"dinner tonight is {rng.pick(['instant ramen', 'cereal', 'whatever is in the dining hall'])} again")

    posts.append(f"my mom sent a pic of {pet.name} wearing a sweater and i had to leave class")

    posts.append(rng.pick([
        f"shift at {persona.occupation.workplace} went long, homework will be done at 2am as usual",
        "why do textbooks cost more than my rent",
    ]))

    posts.append(f"pulled an all nighter and now i'm {rng.pick(['seeing sounds', 'vibrating', 'unstoppable'])}"
                 + emoji(persona, rng, _VIBES))

    friend2 = other_friend(persona, friend)
    posts.append(f"{friend2.handle} {rng.pick(['we need to hang out before break', 'you left your charger at my place', 'happy birthday!!!'])}")

    posts.append(f"{rng.pick(persona.current_struggles)} but at least it's {rng.pick(persona.current_joys)} season")

    posts.append(f"found a hidden study spot in {city} and i'm never telling anyone where it is")

    posts.append(rng.pick([
        "registering for classes is the hunger games",
        "professor cancelled class, best day of my life",
    ]) + emoji(persona, rng, _VIBES))

    return finish(posts, rng)
