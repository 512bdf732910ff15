#!/usr/bin/env python
import os, argparse, json
from dotenv import load_dotenv
from interview_scoring.runner import run_scoring_pass

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("input", help="Path to session JSON with a top-level 'answers' list")
    ap.add_argument("--out", help="Output path (defaults to <input>_confidence.json)")
    args = ap.parse_args()

    load_dotenv()

    out = args.out or (os.path.splitext(args.input)[0] + "_confidence.json")
    result = run_scoring_pass(args.input, out)
    print(json.dumps({"saved": out, "answers": result["meta"]["total_answers"],
                      "confidence_mean": result["overall"]["confidence_mean"]}, indent=2))

if __name__ == "__main__":
    main()
