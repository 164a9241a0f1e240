"""
Iris k-NN Classifier - Main Entry Point

This script runs the k-nearest-neighbors evaluation pipeline:
1. Load configuration (via Hydra)
2. Load dataset
3. Min-max normalize over the FULL dataset (before folding)
4. k-fold cross-validation of the classifier
5. Optional sweep over k values
6. Example prediction for an ad-hoc query record
"""

import random
from typing import Any, Dict, List, Optional

import hydra
from hydra.utils import to_absolute_path
from omegaconf import DictConfig, OmegaConf
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from sklearn.metrics import classification_report

from iris_knn.data.dataset import IrisDataset
from iris_knn.data.record import Record, FEATURE_NAMES
from iris_knn.evaluation.metrics import mean_accuracy
from iris_knn.features.scaler import MinMaxScaler
from iris_knn.models.KNN import KNNClassifier, k_nearest_neighbors
from iris_knn.training.cross_validation import CrossValidator, cross_validation_split, evaluate_algorithm
from iris_knn.utils.helpers import format_scores
from iris_knn.utils.plotting import plot_fold_scores


def run_k_sweep(records: List[Record], k_values: List[int], n_folds: int) -> Dict[int, float]:
    """
    Mean cross-validated accuracy for each candidate k.

    Candidates larger than the smallest training set are skipped.

    Args:
        records: Dataset (already normalized if requested)
        k_values: Candidate neighbor counts
        n_folds: Number of folds

    Returns:
        Mapping of k to mean accuracy.

    Raises:
        ContractViolation: If n_folds is not in 1..len(records).
    """
    folds = cross_validation_split(records, n_folds)
    # With one fold the model trains on that fold itself
    min_train = len(records) if n_folds == 1 else len(records) - max(len(f) for f in folds)

    results = {}
    for k in k_values:
        if k > min_train:
            print(f"     k={k}: skipped (only {min_train} training records per fold)")
            continue
        scores = evaluate_algorithm(records, k_nearest_neighbors, n_folds, k)
        results[k] = mean_accuracy(scores)
        print(f"     k={k}: Mean Accuracy = {results[k]:.3f}%")
    return results


def build_query(cfg: DictConfig) -> Record:
    """Query record from cfg.query.features, or a random one when unset."""
    features = OmegaConf.select(cfg, "query.features")
    if features is None:
        seed = OmegaConf.select(cfg, "data.seed")
        return Record.random(random.Random(seed))
    return Record(list(features), "?")


def run(cfg: DictConfig) -> Dict[str, Any]:
    """
    Run the full pipeline for a composed config.

    Args:
        cfg: Hydra/OmegaConf config object

    Returns:
        Dictionary with fold scores, mean accuracy, k sweep and example prediction.
    """
    n_folds = cfg.evaluation.n_folds
    k = cfg.model.knn.k

    # Load dataset
    print("\n2. Loading dataset...")
    dataset = IrisDataset(to_absolute_path(cfg.data.path)).load()
    dataset.print_summary("Iris Dataset Summary")
    records = dataset.records

    # Normalize using global min/max (computed before the fold split)
    print("\n3. Preprocessing...")
    scaler: Optional[MinMaxScaler] = None
    if cfg.preprocessing.normalize:
        scaler = MinMaxScaler()
        records = scaler.fit_transform(records)
        for name, stat in zip(FEATURE_NAMES, scaler.stats):
            print(f"   - {name:13}: min={stat.min:.2f}, max={stat.max:.2f}")
    else:
        print("   Normalization disabled in config. Skipping.")

    # Cross-validation
    print(f"\n4. Cross-validation ({n_folds} folds, k={k})...")
    validator = CrossValidator(k_nearest_neighbors, n_folds=n_folds,
                               num_neighbors=k, verbose=True)
    scores = validator.evaluate(records)
    print(f"   Scores: {format_scores(scores)}")
    print(f"   Mean Accuracy: {validator.mean_accuracy:.3f}%")

    if OmegaConf.select(cfg, "output.report", default=False):
        print(f"\n   Per-Class Report (pooled over folds):")
        print(f"   {'=' * 40}")
        print(classification_report(validator.actual, validator.predicted, zero_division=0))

    if cfg.output.plot:
        plot_path = to_absolute_path(cfg.output.plot_path)
        fig, _ = plot_fold_scores(scores, title=f"{n_folds}-fold accuracy (k={k})",
                                  out_path=plot_path)
        plt.close(fig)
        print(f"   ✓ Plot saved to {plot_path}")

    # k sweep
    k_values = list(OmegaConf.select(cfg, "evaluation.k_values", default=[]) or [])
    sweep = {}
    print("\n5. Tuning k...")
    if k_values:
        sweep = run_k_sweep(records, k_values, n_folds)
        if sweep:
            best_k = max(sweep, key=lambda x: sweep[x])
            print(f"   ✓ Best k found: {best_k} (Acc: {sweep[best_k]:.3f}%)")
    else:
        print("   No k values configured. Skipping.")

    # Example prediction on the whole (normalized) dataset
    print("\n6. Example prediction...")
    query = build_query(cfg)
    model_query = scaler.transform([query])[0] if scaler is not None else query
    classifier = KNNClassifier(cfg=cfg.model.knn).fit(records)
    prediction = classifier.predict_one(model_query)
    print(f"   Data={list(query.features)}, Predicted: {prediction}")

    return {
        "scores": scores,
        "mean_accuracy": validator.mean_accuracy,
        "k_sweep": sweep,
        "query": query,
        "prediction": prediction,
    }


@hydra.main(version_base=None, config_path="configs", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main function to run the iris k-NN pipeline."""
    print("Iris k-NN Classifier")
    print("=" * 40)

    print("\n1. Configuration loaded via Hydra:")
    print(OmegaConf.to_yaml(cfg))

    run(cfg)

    print("\n" + "=" * 40)
    print("Pipeline Complete!")


if __name__ == "__main__":
    main()
