#!/usr/bin/env python3
import argparse
import matplotlib.pyplot as plt
import mwm

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--shape', type=float, default=2.0)
    parser.add_argument('--root-mean', type=float, default=1.0)
    parser.add_argument('--depth', type=int, default=16)
    parser.add_argument('--seed', type=int, default=None)
    args = parser.parse_args()
    print(f'shape: {args.shape} root mean: {args.root_mean} size: {2**args.depth}')

    params = mwm.ScaleParameters(shapes=[args.shape] * args.depth, root_mean=args.root_mean)
    x = mwm.mwm_synthesize(params, rng=args.seed)

    plt.figure(figsize=(10, 6))
    plt.plot(x, 'k-', linewidth=0.5)
    plt.axis('off')
    plt.tight_layout()
    plt.show()

if __name__ == '__main__':
    main()
