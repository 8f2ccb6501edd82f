from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom


def compose_healthcare(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    job = persona.occupation
    pr = pet_pronouns(rng)
    posts: list[str] = []

    posts.append(rng.pick([
        f"Coming home to {pet.name} after a 12 hour shift is the best part of my day. "
        f"Adopted {pr.object} in {pet.adoption_year} and {pr.subject} hasn't missed a single welcome home since.",
        f"{pet_tenure(persona)} since I brought {pet.name} home in {pet.adoption_year}. Best therapist I have, and free.",
    ]))

    posts.append(rng.pick([
        f"Shift {rng.int(3, 5)} of {rng.int(5, 6)} this week. Feet are filing a formal complaint.",
        "Charted for two hours after my shift ended. Love the patients, not the paperwork.",
        f"Nobody warns you that {rng.pick(job.dislikes)} is the hardest part of this job.",
    ]))

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} thank you for swapping shifts with me, I owe you a coffee",
        f"{friend.handle} breakfast after nights on Friday? I need a real meal.",
    ]))

    posts.append(rng.pick([
        f"Shoutout to the {city} coffee shop that opens at 5am. You are doing the lord's work.",
        f"{city} drivers at 7am after a night shift are a special kind of test.",
    ]))

    posts.append("Reminder: drink water. Signed, someone who forgot to drink water for 12 hours."
                 + emoji(persona, rng, ["💧", "🩺"]))

    posts.append(f"{pet.name} {pet.fun_fact}. Also {pr.subject} has perfected the art of sleeping on my scrubs.")

    posts.append(rng.pick([
        "Had a patient thank me by name today. That one is going to carry me all week.",
        "Small wins: the patient who wouldn't talk to anyone finally smiled today.",
    ]))

    posts.append(f"Short staffed again at {job.workplace}. We make it work, but we shouldn't have to.")

    posts.append(f"Long shift done. Finally home in {city} and the couch is calling.")

    friend2 = other_friend(persona, friend)
    posts.append(f"{friend2.handle} congrats on passing boards!! knew you would")

    posts.append(f"Sleep schedule status: {rng.pick(['nonexistent', 'theoretical', 'a rumor'])}.")

    posts.append(
        f"{job.years_in_role} years as a {job.title.lower()}. Still learning something every shift."
    )

    return finish(posts, rng)
