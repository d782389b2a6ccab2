"""
Demo of Lloyd k-means clustering.

This example shows how to:
1. Generate synthetic blobs
2. Cluster them with the functional API and the estimator
3. Compare several seeds with the best-of-n search
"""

import torch

from lloyd import ClusteringParameters, KMeans, cluster, get_best_means, inertia


def generate_blob_data(n_points_per_cluster=200, n_clusters=4, dim=3,
                       spread=8.0, noise_level=1.0):
    """Generate isotropic Gaussian blobs around random centers."""
    torch.manual_seed(42)

    centers = spread * torch.randn(n_clusters, dim)
    data = torch.cat([
        center + noise_level * torch.randn(n_points_per_cluster, dim)
        for center in centers
    ])
    labels = torch.arange(n_clusters).repeat_interleave(n_points_per_cluster)
    return data, labels, centers


def main():
    X, true_labels, true_centers = generate_blob_data()
    n_clusters = true_centers.shape[0]

    # Functional API
    params = (ClusteringParameters(n_clusters)
              .set_max_iteration(100)
              .set_min_delta(1e-6)
              .set_random_seed(7))
    means, labels = cluster(X, params)
    print(f"cluster(): inertia = {inertia(X, labels, means):.3f}")

    # Estimator API with progress output
    km = KMeans(n_clusters=n_clusters, max_iter=100, min_delta=1e-6,
                random_state=7, verbose=1)
    km.fit(X)
    print(f"KMeans: {km.status_.value} after {km.n_iter_} iterations, "
          f"inertia = {km.inertia_:.3f}")
    print(f"Cluster sizes: {torch.bincount(km.labels_, minlength=n_clusters).tolist()}")

    # Best of several seeds
    best_means, best_labels = get_best_means(X, params, n_tries=10)
    print(f"best of 10: inertia = {inertia(X, best_labels, best_means):.3f}")

    # Integer data keeps its scalar type
    X_int = (X * 10).round().to(torch.int32)
    int_means, _ = cluster(X_int, params)
    print(f"integer means ({int_means.dtype}):\n{int_means}")


if __name__ == '__main__':
    main()
