from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom

_COMMUNITY = ["❤️", "🏡", "🌳", "🙌"]


def compose_local(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    pr = pet_pronouns(rng)
    outing = f"the {city} dog park" if pet.species == "dog" else f"our vet in {city}"
    posts: list[str] = []

    posts.append(rng.pick([
        f"Took {pet.name} to {outing} this morning. Everyone knows {pr.object} by name now. "
        f"Adopted {pr.object} from the local shelter in {pet.adoption_year}, best thing I ever did for this town.",
        f"{pet.name} and I have walked the same neighborhood loop every morning since {pet.adoption_year}. "
        f"{pet_tenure(persona)} of waving at the same neighbors.",
    ]) + emoji(persona, rng, _COMMUNITY))

    posts.append(rng.pick([
        f"Huge turnout at the {city} farmers market today. Love seeing this town show up for local growers.",
        f"The {city} library book sale is this weekend. Get there early, the good stuff goes fast.",
    ]))

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} thanks for organizing the park cleanup! We filled {rng.int(12, 40)} bags.",
        f"{friend.handle} see you at the town hall meeting Thursday?",
    ]))

    posts.append(rng.pick([
        f"Reminder that the {rng.pick(['bakery', 'hardware store', 'bookshop'])} on Main Street is family owned. Shop local.",
        "Our corner diner just celebrated 30 years. Go get a slice of pie and say congrats.",
    ]) + emoji(persona, rng, _COMMUNITY))

    posts.append(f"Road work on {rng.pick(['Oak', 'Elm', 'Maple', 'Cedar'])} Street again. Plan your commute accordingly.")

    posts.append(f"{pet.name} {pet.fun_fact}. The mail carrier has accepted it.")

    posts.append(rng.pick([
        f"Volunteered at the food bank this morning. {rng.int(100, 400)} families served. Proud of this community.",
        "Neighborhood potluck was a success. Somebody please give me the recipe for that potato salad.",
    ]))

    posts.append(f"As a {persona.occupation.title.lower()}, I see the best of this town every single day.")

    friend2 = other_friend(persona, friend)
    posts.append(f"{friend2.handle} great job at the fundraiser, you made it look easy")

    posts.append(f"Born and raised or just moved here, {city} is lucky to have all of you.")

    posts.append("Lost cat poster on the corner of 5th. Please keep an eye out, gray tabby, answers to Smokey.")

    posts.append("Summer concert series starts next week. Bring a chair and your neighbors."
                 + emoji(persona, rng, ["🎶", "☀️"]))

    return finish(posts, rng)
