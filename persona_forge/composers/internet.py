from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom

_REACTIONS = ["💀", "😭", "✨", "🫠", "😤", "🙃"]


def compose_internet(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city.lower()
    pr = pet_pronouns(rng)
    posts: list[str] = []

    posts.append(rng.pick([
        f"{pet.name.lower()} has been my whole personality since {pet.adoption_year} and honestly that's fine",
        f"got {pet.name.lower()} in {pet.adoption_year}, {pet_tenure(persona)} later {pr.subject} still "
        f"{pet.fun_fact} and i would die for {pr.object}",
    ]) + emoji(persona, rng, ["🐾", "😭", "💕"]))

    posts.append(rng.pick([
        "me: i'll go to bed early tonight\nalso me at 3am: watching a video essay about a game i've never played",
        f"the way i said i'd be productive today and then {rng.pick(['took a 4 hour nap', 'reorganized my playlists', 'rewatched the same show'])}",
    ]) + emoji(persona, rng, _REACTIONS))

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} NOT YOU POSTING THAT",
        f"{friend.handle} bestie we need to talk about what happened last night",
        f"{friend.handle} this is literally us",
    ]))

    posts.append(
        f"{city} {rng.pick(['weather', 'public transit', 'rent'])} is actually unhinged rn"
        + emoji(persona, rng, _REACTIONS)
    )

    posts.append(rng.pick([
        f"new {rng.pick(['edit', 'video', 'thread'])} dropping tonight, it took {rng.int(6, 30)} hours and i hate it",
        "the algorithm hates me specifically and i have proof",
    ]))

    posts.append(f"{pet.name.lower()} just {rng.pick(['screamed at a wall', 'ate a sock', 'stared at me for 10 minutes'])} "
                 f"and i'm supposed to act normal about it")

    posts.append(rng.pick([
        "not me spending $40 on snacks and calling it self care",
        "my screen time report is a cry for help",
        "why is every app a subscription now",
    ]) + emoji(persona, rng, _REACTIONS))

    posts.append(f"anyone in {city} know a good {rng.pick(['boba place', 'thrift store', 'late night taco spot'])}")

    friend2 = other_friend(persona, friend)
    posts.append(f"{friend2.handle} {rng.pick(['ok but who asked you to be this funny', 'send me that link', 'omw'])}")

    posts.append(rng.pick([
        "i have 47 tabs open and i need all of them",
        f"currently {rng.pick(['procrastinating', 'rotting in bed', 'pretending to work'])} and thriving",
    ]))

    posts.append(
        f"{rng.pick(persona.current_struggles)}. anyway"
    )

    posts.append(rng.pick([
        "hot take: mornings should be illegal",
        "every group chat has one person who never replies and it's me",
        f"{rng.pick(persona.current_joys)} era",
    ]) + emoji(persona, rng, _REACTIONS))

    return finish(posts, rng)
