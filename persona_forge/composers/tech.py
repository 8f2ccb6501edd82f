from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom


def compose_tech(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    job = persona.occupation
    pr = pet_pronouns(rng)
    posts: list[str] = []

    posts.append(rng.pick([
        f"{pet.name} has been my rubber duck since {pet.adoption_year}. {pet_tenure(persona)} of code reviews "
        f"and {pr.subject} has never once approved a PR.",
        f"Adopted {pet.name} in {pet.adoption_year}. Best deploy I ever shipped. Zero rollbacks in {pet_tenure(persona)}.",
    ]))

    posts.append(rng.pick([
        f"Spent {rng.int(2, 6)} hours debugging only to find a missing {rng.pick(['semicolon', 'env var', 'await'])}.",
        "It works on my machine. Shipping my machine.",
        f"Nothing like {rng.pick(job.dislikes)} to ruin a perfectly good sprint.",
    ]) + emoji(persona, rng, ["🙃", "🐛", "💻"]))

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} did you see the postmortem? Classic DNS.",
        f"{friend.handle} pairing tomorrow? I'll bring the coffee, you bring the patience.",
    ]))

    posts.append(rng.pick([
        f"Anyone know a good coworking spot in {city}? My apartment wifi is held together with hope.",
        f"{city} tech meetup tonight was solid. Good talk on {rng.pick(['observability', 'Rust', 'platform teams'])}.",
    ]))

    posts.append(f"Finally migrated our {rng.pick(['CI pipeline', 'monolith', 'database'])}. "
                 f"Only {rng.int(2, 9)} things caught fire.")

    posts.append(
        f"{pet.name} walked across my keyboard and somehow {rng.pick(['fixed the build', 'opened vim', 'force pushed'])}."
    )

    posts.append(rng.pick([
        f"On-call this week. {rng.int(1, 4)} pages so far. Send snacks.",
        f"Current setup: {rng.pick(['split keyboard', 'ultrawide monitor', 'standing desk'])}, "
        f"{persona.lifestyle.beverage}, and a bug I've been staring at since {persona.lifestyle.wake_time}.",
    ]))

    posts.append(
        f"Hot take: {rng.pick(['tabs are fine', 'most microservices should be a function', 'documentation is a feature'])}."
    )

    friend2 = other_friend(persona, friend)
    posts.append(f"{friend2.handle} thanks for the review. You were right about the race condition.")

    posts.append(
        f"Weekend project: {rng.pick(['home automation', 'a tiny compiler', 'a plant watering bot'])}. "
        f"Progress: mostly reading docs."
        + emoji(persona, rng, ["🤖", "🌱", "⚙️"])
    )

    posts.append(
        f"Rainy day in {city}. Perfect excuse to refactor something nobody asked me to refactor."
    )

    posts.append(
        f"{job.years_in_role} years as a {job.title} and the hardest problem is still naming things."
    )

    return finish(posts, rng)
