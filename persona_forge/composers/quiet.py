from persona_forge.composers.common import finish, pet_pronouns
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom


def compose_quiet(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    pr = pet_pronouns(rng)
    posts: list[str] = []

    posts.append(rng.pick([
        f"{pet.name}. Adopted {pr.object} in {pet.adoption_year}.",
        f"Quiet evening with {pet.name}. Together since {pet.adoption_year}.",
    ]))
    posts.append(rng.pick([f"Rain in {city} today.", f"Nice morning in {city}."]))
    posts.append(rng.pick(["Good book.", "Finished a puzzle.", "Tea and a movie."]))
    posts.append(f"{pet.name} is asleep on my feet.")
    posts.append(rng.pick(["Long week.", "Quiet weekend.", "Back to work."]))
    posts.append(rng.pick(persona.friends).handle + " thanks")
    posts.append(rng.pick(["Made soup.", "Cleaned the apartment.", "Went for a walk."]))
    posts.append(f"First snow in {city}." if rng.boolean() else f"Warm day in {city}.")
    posts.append(f"{pet.name} {pet.fun_fact}.")
    posts.append(rng.pick(["Early night.", "Can't sleep.", "Morning coffee."]))
    posts.append(f"Still a {persona.occupation.title.lower()}. Still tired.")
    posts.append(rng.pick(["Happy Friday.", "Monday again.", "Good day."]))

    return finish(posts, rng)
