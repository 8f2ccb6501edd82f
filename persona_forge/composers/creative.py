from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom

_ART = ["🎨", "✨", "🖌️", "📷", "🌙"]


def compose_creative(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    job = persona.occupation
    pr = pet_pronouns(rng)
    posts: list[str] = []

    posts.append(rng.pick([
        f"{pet.name} has modeled for more of my work than any human. Adopted {pr.object} in {pet.adoption_year} "
        f"and {pr.subject} has been my muse for {pet_tenure(persona)}.",
        f"Painting {pet.name} for the {rng.int(10, 40)}th time. {pet_tenure(persona)} since {pet.adoption_year} "
        f"and {pr.subject} still won't sit still.",
    ]) + emoji(persona, rng, _ART))

    posts.append(rng.pick([
        f"Commissions are {rng.pick(['open', 'closed for now', 'almost full'])}. DM me if you're interested.",
        "Client asked for 'something like this but completely different'. Love this job.",
        f"Art block day {rng.int(2, 9)}. Staring at a blank canvas, it's staring back.",
    ]))

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} your new piece is incredible, the colors!!",
        f"{friend.handle} collab this summer? I have an idea and it's weird",
    ]))

    posts.append(rng.pick([
        f"The light in {city} at golden hour is unreal. Grabbed my camera and ran.",
        f"Setting up at the {city} art walk this weekend. Come say hi.",
    ]) + emoji(persona, rng, _ART))

    posts.append(f"Someone asked me to work for exposure again. {rng.pick(['No.', 'Exposure does not pay rent.', 'Hard pass.'])}")

    posts.append(f"{pet.name} walked through wet paint and now there's a signature on my latest piece.")

    posts.append(rng.pick([
        f"Sketchbook page {rng.int(40, 120)}. Mostly hands. Hands are hard.",
        f"New {rng.pick(['brushes', 'lens', 'tablet'])} arrived and I'm already in love.",
    ]))

    posts.append(f"Being a {job.title.lower()} means {rng.pick(job.dislikes)} and pure joy, sometimes in the same hour.")

    friend2 = other_friend(persona, friend)
    posts.append(f"{friend2.handle} thanks for sharing my work, it means a lot")

    posts.append(rng.pick([
        f"Tiny studio, big dreams. {city} rent is not helping.",
        f"Found a new favorite cafe in {city} to sketch in. Perfect window seat.",
    ]))

    posts.append("Finished a piece at 3am and it's either my best work or fever dream. Will decide tomorrow.")

    posts.append(f"Current mood: {rng.pick(persona.current_joys)}, and {rng.pick(persona.current_struggles)}.")

    return finish(posts, rng)
