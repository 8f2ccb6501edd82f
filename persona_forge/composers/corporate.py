from persona_forge.composers.common import emoji, finish, other_friend, pet_pronouns, pet_tenure
from persona_forge.models import Persona
from persona_forge.utils.rng import SeededRandom


def compose_corporate(persona: Persona, rng: SeededRandom) -> list[str]:
    pet = persona.pet
    city = persona.city
    job = persona.occupation
    pr = pet_pronouns(rng)
    posts: list[str] = []

    posts.append(
        f"Been with {pet.name} for {pet_tenure(persona)} now (adopted {pr.object} back in {pet.adoption_year}). "
        f"Best decision I made {rng.pick(['that year', 'when I moved to ' + city, 'in a long time'])}. "
        + rng.pick([
            f"{pet.name} is napping next to me while I work from home today.",
            f"Still the best {pet.species} I know.",
        ])
    )

    posts.append(rng.pick([
        f"Wrapped up a successful {rng.pick(['client presentation', 'quarterly review', 'strategy session'])} today. "
        "Team executed flawlessly. This is why collaboration matters.",
        f"Proud of the work our team delivered this {rng.pick(['quarter', 'month', 'week'])}. "
        "Long hours but the results speak for themselves.",
        f"{rng.pick(['Interesting', 'Great', 'Productive'])} {rng.pick(['panel', 'conversation', 'roundtable'])} "
        f"this morning on {rng.pick(['digital transformation', 'leadership development', 'market trends'])}. "
        f"Key takeaway: {rng.pick(['execution beats strategy', 'culture eats strategy for breakfast', 'people are everything'])}.",
    ]) + emoji(persona, rng, ["📈", "🙌", "💼"]))

    friend = rng.pick(persona.friends)
    posts.append(rng.pick([
        f"{friend.handle} Thanks for the coffee earlier. Always good to catch up. Let's circle back on what we discussed.",
        f"Congrats to {friend.handle} on the promotion! Well deserved. Looking forward to seeing what you do in the new role.",
        f"{friend.handle} Saw your post about {rng.pick(['the industry report', 'that article', 'the conference'])}. "
        "Would love to hear more, sending you a DM.",
    ]))

    posts.append(rng.pick([
        f"{city} traffic never ceases to amaze me. {rng.int(30, 90)} minutes to go {rng.int(3, 15)} miles.",
        f"Flight out of {city} delayed by {rng.int(1, 3)} hours. At least I have time to finish reviewing "
        f"these {rng.pick(['projections', 'reports', 'slide decks'])}.",
    ]))

    posts.append(
        f"Reading \"{rng.pick(['The Lean Startup', 'Good to Great', 'Zero to One', 'Thinking, Fast and Slow'])}\" "
        f"for the {rng.pick(['second', 'third'])} time. Still finding new insights. "
        f"Highly recommend for anyone in {rng.pick(['product', 'leadership', 'strategy'])}."
    )

    posts.append(rng.pick([
        "The amount of email I've gotten today is borderline unmanageable. Blocking off time tomorrow just for my inbox.",
        f"{rng.int(5, 8)} meetings today and {rng.int(2, 4)} of them could have been emails.",
        f"Nothing tests your patience like {rng.pick(job.dislikes)}. Deep breaths.",
    ]))

    posts.append(
        f"{pet.name} decided {rng.int(5, 6)}:{rng.int(10, 45)}am was an appropriate time to start the day. "
        "Not ideal, but at least I got an early start."
    )

    posts.append(
        f"{city} {rng.pick(['restaurant scene', 'skyline at sunset', 'coffee culture'])} "
        f"{rng.pick(['never disappoints', 'is underrated', 'keeps surprising me'])}."
        + emoji(persona, rng, ["🌆", "☕"])
    )

    posts.append(rng.pick([
        f"Finally updated my LinkedIn. Only took {rng.int(3, 8)} months. If you're in the {city} area, always happy to connect.",
        f"{rng.pick(['Dinner', 'Coffee', 'Lunch'])} with {rng.pick(['clients', 'colleagues', 'the team'])} "
        f"{rng.pick(['went great', 'was productive', 'exceeded expectations'])}. These relationships matter.",
    ]))

    friend2 = other_friend(persona, friend)
    posts.append(
        f"{friend2.handle} Let me know when you're free next week. "
        f"Would be good to sync up on {rng.pick(['the project', 'that opportunity', 'next steps'])}."
    )

    posts.append(rng.pick([
        f"{rng.int(15, 45)} unread messages and it's only {rng.int(9, 11)}am. Going to be one of those days.",
        f"Back-to-back calls from {rng.int(8, 10)}am to {rng.int(4, 6)}pm. Exhausting but productive.",
    ]))

    posts.append(rng.pick([
        f"{job.years_in_role} years as {job.title} and still learning something new every day. Grateful for that.",
        f"Closed a {rng.pick(['major', 'significant', 'challenging'])} {rng.pick(['deal', 'project', 'engagement'])} today. "
        "Team effort all the way.",
    ]))

    return finish(posts, rng)
