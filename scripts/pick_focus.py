#!/usr/bin/env python
import argparse, json, logging, random
from dotenv import load_dotenv
from interview_scoring.focus_areas import choose_focus_areas
from interview_scoring.generator import build_focus_instruction
from interview_scoring.loaders import JsonInterviewStore

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("store", help="Directory holding <candidate_id>.json interview files")
    ap.add_argument("candidate", help="Candidate id")
    ap.add_argument("--count", type=int, default=3)
    ap.add_argument("--seed", type=int, help="Seed the draw for a repeatable selection")
    ap.add_argument("--prompt", action="store_true", help="Also print the prompt block")
    args = ap.parse_args()

    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s - %(message)s")

    rng = random.Random(args.seed) if args.seed is not None else None
    focus = choose_focus_areas(JsonInterviewStore(args.store), args.candidate, count=args.count, rng=rng)
    print(json.dumps({"candidate": args.candidate, "focus_areas": focus}, indent=2))
    if args.prompt:
        print(build_focus_instruction(focus))

if __name__ == "__main__":
    main()
